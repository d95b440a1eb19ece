"""Binary search trees: insertion, lookup, deletion, range queries and leaf paths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .binary_tree import Node


def insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` and return the root; equal values go to the right."""
    node = Node(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.data:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[int]) -> Node | None:
    """Build a search tree by inserting the values in order."""
    root = None
    for value in values:
        root = insert(root, value)
    return root


def search(root: Node | None, key: int) -> bool:
    """Return True if ``key`` is in the tree."""
    current = root
    while current is not None:
        if current.data == key:
            return True
        current = current.left if key < current.data else current.right
    return False


def delete(root: Node | None, key: int) -> Node | None:
    """Remove one node holding ``key`` and return the new root.

    A node with two children takes the value of its in-order successor.
    """
    if root is None:
        return None
    if key < root.data:
        root.left = delete(root.left, key)
    elif key > root.data:
        root.right = delete(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.data = successor.data
        root.right = delete(root.right, successor.data)
    return root


def values_in_range(root: Node | None, low: int, high: int) -> list[int]:
    """Values between ``low`` and ``high`` inclusive, in preorder of the visited nodes."""
    found: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if low <= node.data <= high:
            found.append(node.data)
        if high > node.data and node.right is not None:
            stack.append(node.right)
        if low < node.data and node.left is not None:
            stack.append(node.left)
    return found


def _paths(node: Node, prefix: list[int]) -> Iterator[list[int]]:
    path = [*prefix, node.data]
    if node.left is None and node.right is None:
        yield path
        return
    for child in (node.left, node.right):
        if child is not None:
            yield from _paths(child, path)


def root_to_leaf_paths(root: Node | None) -> list[list[int]]:
    """Every path of values from the root to a leaf, left paths first."""
    return list(_paths(root, [])) if root is not None else []