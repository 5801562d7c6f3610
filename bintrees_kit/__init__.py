"""Linked binary trees with traversals, measurements, rotations, drawing,
binary search trees, AVL trees and max heaps."""

__version__ = "0.1.0"