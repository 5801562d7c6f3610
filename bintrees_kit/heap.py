"""Max binary heaps built from linked nodes."""

from __future__ import annotations

from typing import Iterable, Optional

from bintrees_kit.metrics import is_complete, is_perfect
from bintrees_kit.node import Node


def _parents_dominate(tree: Node) -> bool:
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.value > node.value:
                return False
            stack.append(child)
    return True


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and no child exceeds its parent."""
    if not is_complete(tree):
        return False
    return _parents_dominate(tree)


def _swap_with_parent(child: Node) -> None:
    """Exchange the positions of ``child`` and its parent in the tree."""
    parent = child.parent
    grand = parent.parent
    child_left, child_right = child.left, child.right
    if parent.left is child:
        child.left, child.right = parent, parent.right
    else:
        child.left, child.right = parent.left, parent
    for node in (child.left, child.right):
        if node is not None:
            node.parent = child
    parent.left, parent.right = child_left, child_right
    for node in (child_left, child_right):
        if node is not None:
            node.parent = parent
    if grand is not None:
        if grand.left is parent:
            grand.left = child
        else:
            grand.right = child
    child.parent = grand


def heap_insert(root: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert ``value`` into a max heap and return ``(new_root, new_node)``.

    The node goes to the next free place in level order and then moves up
    while it is greater than its parent.
    """
    new = Node(value)
    if root is None:
        return new, new
    node = root
    while True:
        go_left = is_perfect(node) or not is_perfect(node.left)
        child = node.left if go_left else node.right
        if child is None:
            new.parent = node
            if go_left:
                node.left = new
            else:
                node.right = new
            break
        node = child
    while new.parent is not None and new.value > new.parent.value:
        _swap_with_parent(new)
    if new.parent is None:
        root = new
    return root, new


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting values in order."""
    root: Optional[Node] = None
    for value in values:
        root, _ = heap_insert(root, value)
    return root