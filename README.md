# bintree

A small library for building and inspecting linked binary trees of
integers. Every node knows its value, its parent and its two children, so
you can walk down to the leaves or back up to the root.

## Modules

- `bintree.tree`: the `Node` class and the operations on trees.
- `bintree.printer`: ASCII drawings of trees.
- `bintree.demo`: numbered demonstrations and the `bintree-demo` command.

## Building trees

- `Node(value, parent=None, left=None, right=None)`: a node holding an
  integer. Creating a node records its parent but does not attach it to
  one of the parent's child slots; set `parent.left` or `parent.right`
  yourself, or use the insert functions below.
- `insert_left(parent, value)` and `insert_right(parent, value)`: create a
  node and attach it as a child of `parent`, returning it. If that side
  already had a child, the old child is moved down beneath the new node on
  the same side. Passing `None` as the parent raises `ValueError`.
- `delete(tree)`: take a tree apart. The tree is detached from its parent
  and every node in it loses its links to its parent and children.
  `delete(None)` does nothing.

## Questions about a single node

- `is_leaf(node)`: true if the node exists and has no children.
- `is_root(node)`: true if the node exists and has no parent.
- `depth(node)`: the number of edges from the node up to the root; 0 for
  a root or for `None`.
- `sibling(node)`: the other child of the node's parent, or `None`.
- `uncle(node)`: the sibling of the node's parent, or `None`.

## Walking a tree

`preorder(tree)`, `inorder(tree)` and `postorder(tree)` are generators that
yield the node values in that order. An empty tree (`None`) yields nothing.

## Measuring a tree

- `height(tree)`: the longest root-to-leaf path in edges. A lone node and
  an empty tree both have height 0.
- `size(tree)`: the number of nodes.
- `leaves(tree)`: the number of nodes without children.
- `internal_nodes(tree)`: the number of nodes with at least one child.
- `balance(tree)`: the height of the left subtree minus that of the right
  subtree, where an empty subtree counts 0 and a single node counts 1;
  0 for `None`.
- `is_full(tree)`: true when the tree is not empty and every node has
  either no children or two.
- `is_perfect(tree)`: true when the tree is not empty, full, and has all
  its leaves on the same level.

## Drawing a tree

- `render(tree)` returns the drawing as a string, one newline-terminated
  row per line of output, with `/` and `\` edges between a node and its
  children. An empty tree renders as the empty string.
- `print_tree(tree, file=None)` writes that drawing to `file`, or to
  standard output when no file is given.

## Example

```python
from bintree.tree import Node, insert_left, insert_right, inorder, height, is_perfect
from bintree.printer import render

root = Node(98)
insert_left(root, 12)
insert_right(root, 402)
insert_right(root.left, 54)
insert_right(root, 128)

print(render(root), end="")
print(list(inorder(root)))   # [12, 54, 98, 128, 402]
print(height(root))          # 2
print(is_perfect(root))      # False
```

## Demo command

The package installs a command that runs one of nineteen numbered
demonstrations, 0 to 18. Each builds a sample tree, draws it and, for most
of them, prints the result of one operation on some of its nodes:

```
bintree-demo 0
bintree-demo 14
```

The same demonstrations can be run from Python with
`bintree.demo.run_demo(number, out=None)`, which writes to `out` or to
standard output; an unknown number raises `ValueError`.

## What it does not do

The trees are plain linked nodes. There is no ordered (search-tree)
insertion, no rebalancing, no removal of a single node, and no saving or
loading of trees.

## Running the tests

```
pip install -e ".[test]"
pytest
```