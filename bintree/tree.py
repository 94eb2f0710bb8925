"""Binary tree nodes and the operations that inspect and modify them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = [
    "Node",
    "insert_left",
    "insert_right",
    "delete",
    "is_leaf",
    "is_root",
    "preorder",
    "inorder",
    "postorder",
    "height",
    "depth",
    "size",
    "leaves",
    "internal_nodes",
    "balance",
    "is_full",
    "is_perfect",
    "sibling",
    "uncle",
]


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node records its parent but does not attach it to one of the
    parent's child slots; that is left to the caller.
    """

    value: int
    parent: Node | None = None
    left: Node | None = field(default=None)
    right: Node | None = field(default=None)

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _require_parent(parent: Node | None) -> Node:
    if parent is None:
        raise ValueError("parent node is required")
    return parent


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of *parent*.

    An existing left child becomes the left child of the new node.
    """
    parent = _require_parent(parent)
    node = Node(value, parent)
    if parent.left is not None:
        node.left = parent.left
        parent.left.parent = node
    parent.left = node
    return node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of *parent*.

    An existing right child becomes the right child of the new node.
    """
    parent = _require_parent(parent)
    node = Node(value, parent)
    if parent.right is not None:
        node.right = parent.right
        parent.right.parent = node
    parent.right = node
    return node


def _nodes(tree: Node | None) -> Iterator[Node]:
    """Yield the nodes of *tree* in pre-order."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def delete(tree: Node | None) -> None:
    """Dismantle *tree*, unlinking every node and detaching it from its parent."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    for node in list(_nodes(tree)):
        node.left = node.right = node.parent = None


def is_leaf(node: Node | None) -> bool:
    """Return True if *node* exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """Return True if *node* exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of *tree* in pre-order (node, left, right)."""
    for node in _nodes(tree):
        yield node.value


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of *tree* in in-order (left, node, right)."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of *tree* in post-order (left, right, node)."""
    stack = [tree] if tree is not None else []
    reversed_values: list[int] = []
    while stack:
        node = stack.pop()
        reversed_values.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reversed_values)


def _children(node: Node) -> list[Node]:
    return [child for child in (node.left, node.right) if child is not None]


def _levels(tree: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [child for node in level for child in _children(node)]
    return count


def height(tree: Node | None) -> int:
    """Return the height of *tree* in edges; 0 for an empty tree or a leaf."""
    return max(_levels(tree) - 1, 0)


def depth(node: Node | None) -> int:
    """Return the number of edges between *node* and the root; 0 if empty."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Return the number of nodes in *tree*."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of leaves in *tree*."""
    return sum(1 for node in _nodes(tree) if is_leaf(node))


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes in *tree* with at least one child."""
    return sum(1 for node in _nodes(tree) if not is_leaf(node))


def balance(tree: Node | None) -> int:
    """Return the balance factor of *tree*: left height minus right height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node of a non-empty *tree* has zero or two children."""
    if tree is None:
        return False
    return all(len(_children(node)) != 1 for node in _nodes(tree))


def is_perfect(tree: Node | None) -> bool:
    """Return True if *tree* is non-empty, full, and has all leaves on one level."""
    if tree is None:
        return False
    level = [tree]
    while level:
        next_level: list[Node] = []
        leaf_count = 0
        for node in level:
            kids = _children(node)
            if len(kids) == 1:
                return False
            if not kids:
                leaf_count += 1
            next_level.extend(kids)
        if leaf_count and next_level:
            return False
        level = next_level
    return True


def sibling(node: Node | None) -> Node | None:
    """Return the other child of *node*'s parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.right if parent.left is node else parent.left


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of *node*'s parent, or None."""
    if node is None:
        return None
    return sibling(node.parent)