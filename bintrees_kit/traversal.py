"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from bintrees_kit.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node first, then left subtree, then right subtree."""
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node.value
        stack.append(node.right)
        stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, then node, then right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, then right subtree, then node."""
    if tree is None:
        return
    stack: list[tuple[Node, bool]] = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right within each level."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)