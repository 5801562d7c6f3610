"""Text drawing of binary trees, one line per level."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintrees_kit.metrics import height
from bintrees_kit.node import Node


def _label(node: Node) -> str:
    return f"({node.value:03d})"


def _extent(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return len(_label(tree)) + _extent(tree.left) + _extent(tree.right)


def _draw(tree: Optional[Node], offset: int, level: int, rows: List[List[str]]) -> int:
    """Draw the subtree into ``rows`` starting at ``offset``; return its width."""
    if tree is None:
        return 0
    label = _label(tree)
    width = len(label)
    is_left = tree.parent is not None and tree.parent.left is tree
    left = _draw(tree.left, offset, level + 1, rows)
    right = _draw(tree.right, offset + left + width, level + 1, rows)
    row = rows[level]
    row[offset + left:offset + left + width] = label
    if level:
        above = rows[level - 1]
        if is_left:
            start = offset + left + width // 2
            above[start:start + width + right] = "-" * (width + right)
        else:
            start = offset - width // 2
            above[start:start + left + width] = "-" * (left + width)
        above[offset + left + width // 2] = "."
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree; an empty string for an empty tree."""
    if tree is None:
        return ""
    extent = _extent(tree)
    rows = [[" "] * extent for _ in range(height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        lines.append(text[:2] + text[2:].rstrip(" "))
    return "\n".join(lines) + "\n"


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))