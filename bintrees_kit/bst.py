"""Binary search trees: validation, insertion, lookup and removal."""

from __future__ import annotations

from typing import Iterable, Optional

from bintrees_kit.node import Node


def _within(node: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if node is None:
        return True
    if low is not None and node.value <= low:
        return False
    if high is not None and node.value >= high:
        return False
    return _within(node.left, low, node.value) and _within(node.right, node.value, high)


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a non-empty binary search tree without duplicates."""
    return tree is not None and _within(tree, None, None)


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` and return the new node; with no root it becomes the root.

    Raises ValueError if the value is already in the tree.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, parent=node)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, parent=node)
                return node.right
            node = node.right
        else:
            raise ValueError(f"value {value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a binary search tree by inserting values in order, skipping repeats."""
    root: Optional[Node] = None
    for value in values:
        if root is None:
            root = bst_insert(None, value)
            continue
        try:
            bst_insert(root, value)
        except ValueError:
            continue
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None if it is absent."""
    node = tree
    while node is not None:
        if value < node.value:
            node = node.left
        elif value > node.value:
            node = node.right
        else:
            return node
    return None


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the tree and return the root of the result.

    A node with two children takes the value of its in-order successor,
    which is removed in its place. An absent value leaves the tree as is.
    """
    target = bst_search(root, value)
    if target is None:
        return root
    if target.left is not None and target.right is not None:
        successor = target.right
        while successor.left is not None:
            successor = successor.left
        target.value = successor.value
        target = successor
    child = target.left if target.left is not None else target.right
    parent = target.parent
    if child is not None:
        child.parent = parent
    if parent is None:
        root = child
    elif parent.left is target:
        parent.left = child
    else:
        parent.right = child
    target.parent = target.left = target.right = None
    return root