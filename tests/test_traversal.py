import pytest

from bintrees_kit.node import Node
from bintrees_kit.traversal import inorder, levelorder, postorder, preorder


def _sample_tree():
    root = Node(98)
    root.left = Node(12, parent=root)
    root.right = Node(402, parent=root)
    root.left.left = Node(6, parent=root.left)
    root.left.right = Node(56, parent=root.left)
    root.right.left = Node(256, parent=root.right)
    root.right.right = Node(512, parent=root.right)
    return root


VALUES = [98, 12, 402, 6, 56, 256, 512]


def test_preorder_sequence():
    assert list(preorder(_sample_tree())) == [98, 12, 6, 56, 402, 256, 512]


def test_postorder_sequence():
    assert list(postorder(_sample_tree())) == [6, 56, 12, 256, 512, 402, 98]


def test_levelorder_sequence():
    assert list(levelorder(_sample_tree())) == VALUES


def test_inorder_of_search_tree_is_sorted():
    assert list(inorder(_sample_tree())) == sorted(VALUES)


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_every_walk_visits_each_value_once(walk):
    assert sorted(walk(_sample_tree())) == sorted(VALUES)


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_empty_tree_yields_nothing(walk):
    assert list(walk(None)) == []


def test_root_position():
    tree = _sample_tree()
    assert next(preorder(tree)) == tree.value
    assert list(postorder(tree))[-1] == tree.value
    assert next(levelorder(tree)) == tree.value


def test_single_node():
    node = Node(7)
    for walk in (preorder, inorder, postorder, levelorder):
        assert list(walk(node)) == [7]


def test_levelorder_of_subtree():
    tree = _sample_tree()
    assert list(levelorder(tree.right)) == [402, 256, 512]