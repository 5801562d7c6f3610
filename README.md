# bintrees_kit

Binary trees made of linked `Node` objects, each holding an integer `value`
and links to its `parent`, `left` and `right` nodes, together with the usual
operations on them. There are no third-party dependencies.

## Modules

- `bintrees_kit.node`: the `Node` dataclass, plus `insert_left`,
  `insert_right`, `delete`, `is_leaf`, `is_root`, `depth`, `sibling`,
  `uncle` and `ancestor` (lowest common ancestor, or `None` for unrelated
  nodes). Inserting beside an existing child pushes that child one level
  down below the new node. `delete` detaches a subtree from its parent and
  breaks every link inside it.
- `bintrees_kit.traversal`: `preorder`, `inorder`, `postorder` and
  `levelorder`. Each is a generator yielding node values.
- `bintrees_kit.metrics`: `height` (edges on the longest downward path,
  0 for a single node or an empty tree), `size`, `leaves`, `internal_nodes`,
  `balance` (left height minus right height), `is_full`, `is_perfect` and
  `is_complete`.
- `bintrees_kit.rotate`: `rotate_left` and `rotate_right`. Each returns the
  node that takes the rotated node's place and updates the parent's link.
  A `ValueError` is raised when the needed child is missing.
- `bintrees_kit.bst`: `is_bst`, `bst_insert`, `array_to_bst`, `bst_search`
  and `bst_remove`.
  - `bst_insert` returns the new node and raises `ValueError` for a value
    already in the tree.
  - `array_to_bst` skips repeated values.
  - `bst_remove` returns the root of the result. An absent value leaves the
    tree as it was. A node with two children takes its in-order successor's
    value.
- `bintrees_kit.avl`: `is_avl`, `avl_insert`, `array_to_avl`, `avl_remove`
  and `sorted_array_to_avl`.
  - `avl_insert` returns a `(new_root, new_node)` pair.
  - `avl_remove` rebalances bottom-up with single rotations and returns the
    new root.
  - `sorted_array_to_avl` makes each middle element the root of its range.
- `bintrees_kit.heap`: `is_heap`, `heap_insert` and `array_to_heap` for max
  binary heaps. `heap_insert` places the value at the next free position in
  level order and moves it up while it is larger than its parent. It returns
  a `(new_root, new_node)` pair.
- `bintrees_kit.printer`: `render` returns an ASCII drawing of a tree, one
  line per level, or an empty string for an empty tree. `print_tree(tree,
  file=None)` writes that drawing to `file`, or to standard output by
  default. Values are drawn zero-padded to at least three characters in
  brackets, such as `(098)`. Parents are joined to their children with
  dashes and dots.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short tour

```python
from bintrees_kit.node import Node, insert_right
from bintrees_kit.traversal import inorder, levelorder
from bintrees_kit.metrics import height, size
from bintrees_kit.bst import array_to_bst, bst_search
from bintrees_kit.avl import array_to_avl, avl_insert, is_avl
from bintrees_kit.heap import array_to_heap, is_heap
from bintrees_kit.printer import print_tree

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)
insert_right(root, 128)

print(height(root), size(root))      # 2 4
print(list(levelorder(root)))        # [98, 12, 128, 402]

tree = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
print(list(inorder(tree)))
print(bst_search(tree, 32).value)    # 32

avl = array_to_avl([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
avl, node = avl_insert(avl, 50)
print(is_avl(avl))                   # True
print_tree(avl)

heap = array_to_heap([5, 30, 12, 40])
print(is_heap(heap))                 # True
```

## What it does not do

This is a library only. It has no command-line program. Heaps can be built
and checked, but there is no function to take the maximum out of a heap or
to turn a heap into a sorted list.