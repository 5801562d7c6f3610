"""Left and right rotations of binary tree nodes."""

from __future__ import annotations

from typing import Optional

from bintrees_kit.node import Node


def _replace_child(parent: Optional[Node], old: Node, new: Node) -> None:
    """Point the parent's link that held ``old`` at ``new`` instead."""
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    elif parent.right is old:
        parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Rotate ``tree`` to the left and return the node that takes its place.

    Raises ValueError if the node is missing or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("a left rotation needs a node with a right child")
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    _replace_child(tree.parent, tree, pivot)
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Rotate ``tree`` to the right and return the node that takes its place.

    Raises ValueError if the node is missing or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("a right rotation needs a node with a left child")
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    _replace_child(tree.parent, tree, pivot)
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot