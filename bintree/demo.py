"""Demonstration programs exercising the tree operations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from .printer import print_tree
from .tree import (
    Node,
    balance,
    delete,
    depth,
    height,
    inorder,
    insert_left,
    insert_right,
    internal_nodes,
    is_full,
    is_leaf,
    is_perfect,
    is_root,
    leaves,
    postorder,
    preorder,
    sibling,
    size,
    uncle,
)

__all__ = ["run_demo", "main"]

_NULL = "(nil)"


def _basic_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    insert_right(root.left, 54)
    insert_right(root, 128)
    return root


def _complete_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _family_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def _demo_node(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    print_tree(root, out)


def _demo_insert(side: Callable[[Node, int], Node], values: tuple[int, int]):
    def demo(out: TextIO) -> None:
        root = Node(98)
        root.left = Node(12, root)
        root.right = Node(402, root)
        print_tree(root, out)
        print(file=out)
        inner, outer = values
        side(root.right if side is insert_left else root.left, inner)
        side(root, outer)
        print_tree(root, out)

    return demo


def _demo_delete(out: TextIO) -> None:
    root = _basic_tree()
    print_tree(root, out)
    delete(root)


def _demo_report(
    label: str, measure: Callable[[Node], object], pick: Callable[[Node], list[Node]]
):
    def demo(out: TextIO) -> None:
        root = _basic_tree()
        print_tree(root, out)
        for node in pick(root):
            result = measure(node)
            if isinstance(result, bool):
                result = int(result)
            print(f"{label} {node.value}: {result}", file=out)

    return demo


def _root_right_rightright(root: Node) -> list[Node]:
    return [root, root.right, root.right.right]


def _root_right_leftright(root: Node) -> list[Node]:
    return [root, root.right, root.left.right]


def _demo_traversal(walk: Callable[[Node], object]):
    def demo(out: TextIO) -> None:
        root = _complete_tree()
        print_tree(root, out)
        for value in walk(root):
            print(value, file=out)

    return demo


def _demo_balance(out: TextIO) -> None:
    root = _basic_tree()
    insert_left(root, 45)
    insert_right(root.left, 50)
    insert_left(root.left.left, 10)
    insert_left(root.left.left.left, 8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {balance(node):+d}", file=out)


def _demo_full(out: TextIO) -> None:
    root = _basic_tree()
    root.left.left = Node(10, root.left)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(is_full(node))}", file=out)


def _demo_perfect(out: TextIO) -> None:
    root = _basic_tree()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)

    root.right.right.left = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)

    root.right.right.right = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}", file=out)


def _describe(node: Node | None) -> str:
    return _NULL if node is None else str(node.value)


def _demo_sibling(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_describe(sibling(node))}", file=out)


def _demo_uncle(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_describe(uncle(node))}", file=out)


_DEMOS: dict[int, Callable[[TextIO], None]] = {
    0: _demo_node,
    1: _demo_insert(insert_left, (128, 54)),
    2: _demo_insert(insert_right, (54, 128)),
    3: _demo_delete,
    4: _demo_report("Is", is_leaf, _root_right_rightright),
    5: _demo_report("Is", is_root, _root_right_rightright),
    6: _demo_traversal(preorder),
    7: _demo_traversal(inorder),
    8: _demo_traversal(postorder),
    9: _demo_report("Height from", height, _root_right_leftright),
    10: _demo_report("Depth of", depth, _root_right_leftright),
    11: _demo_report("Size of", size, _root_right_leftright),
    12: _demo_report("Leaves in", leaves, _root_right_leftright),
    13: _demo_report("Nodes in", internal_nodes, _root_right_leftright),
    14: _demo_balance,
    15: _demo_full,
    16: _demo_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}

# The leaf and root demos print "Is N a leaf/root: R".
_SUFFIXES = {4: "a leaf", 5: "a root"}


def _with_suffix(number: int, demo: Callable[[TextIO], None]):
    suffix = _SUFFIXES[number]
    measure = is_leaf if number == 4 else is_root

    def wrapped(out: TextIO) -> None:
        root = _basic_tree()
        print_tree(root, out)
        for node in _root_right_rightright(root):
            print(f"Is {node.value} {suffix}: {int(measure(node))}", file=out)

    return wrapped


for _number in _SUFFIXES:
    _DEMOS[_number] = _with_suffix(_number, _DEMOS[_number])


def run_demo(number: int, out: TextIO | None = None) -> None:
    """Run demonstration *number* (0 to 18), writing its output to *out*."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number!r}") from None
    demo(out if out is not None else sys.stdout)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point: run the demonstration given by number."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo", description="Run a binary tree demonstration."
    )
    parser.add_argument("number", type=int, choices=sorted(_DEMOS))
    args = parser.parse_args(argv)
    run_demo(args.number)
    return 0


if __name__ == "__main__":
    sys.exit(main())