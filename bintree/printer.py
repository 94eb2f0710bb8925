"""ASCII rendering of binary trees."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .tree import Node

__all__ = ["render", "print_tree"]

_GAP = 3
_INFINITY = 1 << 20


@dataclass(eq=False)
class _Box:
    """Layout information for one node of the rendered tree."""

    label: str
    is_left: bool = False
    left: _Box | None = None
    right: _Box | None = None
    edge_length: int = 0
    height: int = 0
    children: list[_Box] = field(default_factory=list)


def _left_profile(box: _Box | None, x: int, y: int, profile: list[int]) -> None:
    if box is None:
        return
    profile[y] = min(profile[y], x - (len(box.label) - int(box.is_left)) // 2)
    edge = box.edge_length
    if box.left is not None:
        for i in range(1, edge + 1):
            profile[y + i] = min(profile[y + i], x - i)
    _left_profile(box.left, x - edge - 1, y + edge + 1, profile)
    _left_profile(box.right, x + edge + 1, y + edge + 1, profile)


def _right_profile(box: _Box | None, x: int, y: int, profile: list[int]) -> None:
    if box is None:
        return
    not_left = int(not box.is_left)
    profile[y] = max(profile[y], x + (len(box.label) - not_left) // 2)
    edge = box.edge_length
    if box.right is not None:
        for i in range(1, edge + 1):
            profile[y + i] = max(profile[y + i], x + i)
    _right_profile(box.left, x - edge - 1, y + edge + 1, profile)
    _right_profile(box.right, x + edge + 1, y + edge + 1, profile)


def _layout(box: _Box) -> None:
    """Compute the edge length and height of *box*, whose children are laid out."""
    left, right = box.left, box.right
    if left is None and right is None:
        box.edge_length = 0
    else:
        delta = 4
        if left is not None and right is not None:
            right_edge = [-_INFINITY] * left.height
            _right_profile(left, 0, 0, right_edge)
            left_edge = [_INFINITY] * right.height
            _left_profile(right, 0, 0, left_edge)
            for rmost, lmost in zip(right_edge, left_edge):
                delta = max(delta, _GAP + 1 + rmost - lmost)
        if delta > 4 and any(child.height == 1 for child in box.children):
            delta -= 1
        box.edge_length = (delta + 1) // 2 - 1
    box.height = max(
        [1] + [child.height + box.edge_length + 1 for child in box.children]
    )


def _build(node: Node | None, is_left: bool = False) -> _Box | None:
    if node is None:
        return None
    box = _Box(str(node.value), is_left)
    box.left = _build(node.left, True)
    box.right = _build(node.right, False)
    box.children = [child for child in (box.left, box.right) if child is not None]
    _layout(box)
    return box


class _Line:
    """One output row, written left to right at given columns."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.column = 0

    def put(self, column: int, text: str) -> None:
        if column > self.column:
            self._parts.append(" " * (column - self.column))
            self.column = column
        self._parts.append(text)
        self.column += len(text)

    def __str__(self) -> str:
        return "".join(self._parts)


def _draw_level(box: _Box | None, x: int, level: int, line: _Line) -> None:
    if box is None:
        return
    edge = box.edge_length
    if level == 0:
        line.put(x - (len(box.label) - int(box.is_left)) // 2, box.label)
    elif edge >= level:
        if box.left is not None:
            line.put(x - level, "/")
        if box.right is not None:
            line.put(x + level, "\\")
    else:
        _draw_level(box.left, x - edge - 1, level - edge - 1, line)
        _draw_level(box.right, x + edge + 1, level - edge - 1, line)


def render(tree: Node | None) -> str:
    """Return the ASCII drawing of *tree*, one newline-terminated row per level."""
    root = _build(tree)
    if root is None:
        return ""
    profile = [_INFINITY] * root.height
    _left_profile(root, 0, 0, profile)
    xmin = min([0, *profile])
    rows = []
    for level in range(root.height):
        line = _Line()
        _draw_level(root, -xmin, level, line)
        rows.append(f"{line}\n")
    return "".join(rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the ASCII drawing of *tree* to *file* (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))