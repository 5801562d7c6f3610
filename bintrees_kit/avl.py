"""AVL trees: validation, insertion, removal and construction from sequences."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from bintrees_kit.bst import bst_insert, bst_remove
from bintrees_kit.metrics import balance
from bintrees_kit.node import Node
from bintrees_kit.rotate import rotate_left, rotate_right


def _ordered_and_balanced(
    node: Optional[Node], low: Optional[int], high: Optional[int]
) -> bool:
    if node is None:
        return True
    if low is not None and node.value <= low:
        return False
    if high is not None and node.value >= high:
        return False
    if abs(balance(node)) > 1:
        return False
    return _ordered_and_balanced(node.left, low, node.value) and _ordered_and_balanced(
        node.right, node.value, high
    )


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a non-empty, height-balanced search tree."""
    return tree is not None and _ordered_and_balanced(tree, None, None)


def _rebalance_after_insert(node: Node, value: int) -> Node:
    """Restore balance at ``node`` after ``value`` went below it; return the new top."""
    factor = balance(node)
    if factor > 1:
        if value > node.left.value:
            rotate_left(node.left)
        return rotate_right(node)
    if factor < -1:
        if value < node.right.value:
            rotate_right(node.right)
        return rotate_left(node)
    return node


def avl_insert(root: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert ``value`` and return ``(new_root, new_node)``.

    Raises ValueError if the value is already in the tree.
    """
    if root is None:
        node = Node(value)
        return node, node
    new = bst_insert(root, value)
    current = new.parent
    while current is not None:
        top = _rebalance_after_insert(current, value)
        if top.parent is None:
            root = top
        current = top.parent
    return root, new


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting values in order, skipping repeats."""
    root: Optional[Node] = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        root, _ = avl_insert(root, value)
    return root


def _settle(tree: Optional[Node]) -> Optional[Node]:
    """Rebalance the subtree bottom-up with single rotations; return its new top."""
    if tree is None or (tree.left is None and tree.right is None):
        return tree
    _settle(tree.left)
    _settle(tree.right)
    factor = balance(tree)
    if factor > 1:
        return rotate_right(tree)
    if factor < -1:
        return rotate_left(tree)
    return tree


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the tree, rebalance it, and return the new root."""
    if root is None:
        return None
    root = bst_remove(root, value)
    if root is None:
        return None
    return _settle(root)


def _build(values: Sequence[int], begin: int, last: int, parent: Optional[Node]) -> Optional[Node]:
    if begin > last:
        return None
    mid = (begin + last) // 2
    node = Node(values[mid], parent=parent)
    node.left = _build(values, begin, mid - 1, node)
    node.right = _build(values, mid + 1, last, node)
    return node


def sorted_array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build a balanced tree from sorted values, each middle element becoming a root."""
    items = list(values)
    if not items:
        return None
    return _build(items, 0, len(items) - 1, None)