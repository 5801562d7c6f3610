"""Binary tree nodes and the structural queries that work on single nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer and links to its relatives."""

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)


def _lineage(node: Optional[Node]) -> Iterator[Node]:
    """Yield ``node`` and then each of its ancestors up to the root."""
    while node is not None:
        yield node
        node = node.parent


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new left child; an existing left child moves below it."""
    if parent is None:
        raise ValueError("cannot insert below a missing parent")
    new = Node(value, parent=parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new right child; an existing right child moves below it."""
    if parent is None:
        raise ValueError("cannot insert below a missing parent")
    new = Node(value, parent=parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def delete(tree: Optional[Node]) -> None:
    """Dismantle the subtree rooted at ``tree``, breaking every link in it."""
    if tree is None:
        return
    owner = tree.parent
    if owner is not None:
        if owner.left is tree:
            owner.left = None
        if owner.right is tree:
            owner.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def depth(node: Optional[Node]) -> int:
    """Return the number of edges between ``node`` and its root."""
    return max(sum(1 for _ in _lineage(node)) - 1, 0)


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, if any."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, if any."""
    if node is None:
        return None
    return sibling(node.parent)


def ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest common ancestor of two nodes, or None if unrelated."""
    if first is None or second is None:
        return None
    seen = {id(node) for node in _lineage(first)}
    return next((node for node in _lineage(second) if id(node) in seen), None)