import pytest

from bintrees_kit.avl import (
    array_to_avl,
    avl_insert,
    avl_remove,
    is_avl,
    sorted_array_to_avl,
)
from bintrees_kit.metrics import size
from bintrees_kit.node import Node, insert_left, insert_right
from bintrees_kit.traversal import inorder, levelorder

ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]
SORTED = [1, 2, 20, 21, 22, 32, 34, 47, 62, 68, 79, 84, 87, 91, 95, 98]


def _links_ok(node, parent=None):
    if node is None:
        return True
    return (
        node.parent is parent
        and _links_ok(node.left, node)
        and _links_ok(node.right, node)
    )


def _basic_tree():
    root = Node(98)
    left = insert_left(root, 12)
    right = insert_right(root, 128)
    insert_right(left, 54)
    insert_right(right, 402)
    insert_left(left, 10)
    return root


def test_is_avl_basic_tree():
    root = _basic_tree()
    assert is_avl(root) is True
    assert is_avl(root.left) is True


def test_is_avl_rejects_misplaced_value():
    root = _basic_tree()
    insert_left(root.right, 97)
    assert is_avl(root) is False


def test_is_avl_rejects_unbalanced_tree():
    root = _basic_tree()
    deep = insert_right(root.right.right, 430)
    assert is_avl(root) is False
    insert_left(deep, 420)
    assert is_avl(root) is False


def test_is_avl_empty_tree():
    assert is_avl(None) is False


def test_is_avl_rejects_duplicates():
    root = Node(5)
    insert_left(root, 5)
    assert is_avl(root) is False


def test_avl_insert_into_empty_tree():
    root, node = avl_insert(None, 98)
    assert root is node
    assert node.value == 98


def test_avl_insert_sequence_keeps_invariants():
    root = None
    inserted = []
    for value in [98, 402, 12, 46, 128, 256, 512, 50]:
        root, node = avl_insert(root, value)
        inserted.append(value)
        assert node.value == value
        assert is_avl(root)
        assert root.parent is None
        assert _links_ok(root)
        assert list(inorder(root)) == sorted(inserted)


def test_avl_insert_ascending_rotates():
    root = None
    for value in (1, 2, 3):
        root, _ = avl_insert(root, value)
    assert (root.value, root.left.value, root.right.value) == (2, 1, 3)


def test_avl_insert_duplicate_raises():
    root, _ = avl_insert(None, 10)
    root, _ = avl_insert(root, 20)
    with pytest.raises(ValueError):
        avl_insert(root, 20)


def test_array_to_avl_worked_example():
    tree = array_to_avl(ARRAY)
    assert list(levelorder(tree)) == [
        47, 21, 84, 2, 32, 68, 91, 1, 20, 22, 34, 62, 79, 87, 98, 95,
    ]
    assert is_avl(tree)
    assert _links_ok(tree)


def test_array_to_avl_skips_repeats():
    tree = array_to_avl([5, 3, 5, 8, 3])
    assert list(inorder(tree)) == [3, 5, 8]


def test_array_to_avl_empty():
    assert array_to_avl([]) is None


def test_avl_remove_sequence_keeps_invariants():
    tree = array_to_avl(ARRAY)
    remaining = set(ARRAY)
    for value in (47, 79, 32, 34, 22):
        tree = avl_remove(tree, value)
        remaining.discard(value)
        assert list(inorder(tree)) == sorted(remaining)
        assert is_avl(tree)
        assert _links_ok(tree)


def test_avl_remove_two_children_takes_successor():
    tree = array_to_avl(ARRAY)
    tree = avl_remove(tree, 47)
    assert tree.value == min(v for v in ARRAY if v > 47)


def test_avl_remove_absent_value_leaves_tree():
    tree = array_to_avl(ARRAY)
    tree = avl_remove(tree, 1000)
    assert list(inorder(tree)) == sorted(ARRAY)
    assert size(tree) == len(ARRAY)


def test_avl_remove_from_empty():
    assert avl_remove(None, 3) is None


def test_avl_remove_last_node():
    assert avl_remove(Node(1), 1) is None


def test_sorted_array_to_avl():
    tree = sorted_array_to_avl(SORTED)
    assert list(inorder(tree)) == SORTED
    assert is_avl(tree)
    assert _links_ok(tree)
    assert (tree.value, tree.left.value, tree.right.value) == (47, 21, 84)


def test_sorted_array_to_avl_empty():
    assert sorted_array_to_avl([]) is None


def test_sorted_array_to_avl_keeps_repeats():
    tree = sorted_array_to_avl([1, 1, 2])
    assert size(tree) == 3
    assert list(inorder(tree)) == [1, 1, 2]