"""Size, shape and balance measurements of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from bintrees_kit.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 if empty."""
    if tree is None:
        return 0
    return max(
        (1 + height(child) for child in (tree.left, tree.right) if child is not None),
        default=0,
    )


def _levels(tree: Optional[Node]) -> int:
    """Count the nodes on the longest downward path; 0 if empty."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    has_child = tree.left is not None or tree.right is not None
    return int(has_child) + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right subtree's height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def _perfect_levels(tree: Node) -> int:
    """Return the level count if the subtree is perfect, otherwise 0."""
    if tree.left is None and tree.right is None:
        return 1
    if tree.left is None or tree.right is None:
        return 0
    left = _perfect_levels(tree.left)
    right = _perfect_levels(tree.right)
    return left + 1 if left and left == right else 0


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all its leaves share one depth."""
    return tree is not None and _perfect_levels(tree) > 0


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except perhaps the last, from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True