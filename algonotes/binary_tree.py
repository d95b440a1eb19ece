"""Binary trees: preorder construction, traversals, views, ancestors and paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

EMPTY = -1


@dataclass(eq=False)
class Node:
    """A binary tree node holding a value and two optional children."""

    data: int
    left: Node | None = None
    right: Node | None = None


def build_tree(values: Iterable[int | None]) -> Node | None:
    """Build a tree from a preorder listing in which -1 (or None) marks a missing child."""
    stream = iter(values)

    def build() -> Node | None:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("preorder listing ends before the tree is complete") from None
        if value is None or value == EMPTY:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _preorder_nodes(root: Node | None) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(root: Node | None) -> Iterator[list[Node]]:
    current = [root] if root is not None else []
    while current:
        yield current
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]


def preorder(root: Node | None) -> list[int]:
    """Values in root, left, right order."""
    return [node.data for node in _preorder_nodes(root)]


def inorder(root: Node | None) -> list[int]:
    """Values in left, root, right order."""
    out: list[int] = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.data)
        node = node.right
    return out


def postorder(root: Node | None) -> list[int]:
    """Values in left, right, root order."""
    out: list[int] = []

    def walk(node: Node | None) -> None:
        if node is None:
            return
        walk(node.left)
        walk(node.right)
        out.append(node.data)

    walk(root)
    return out


def level_order(root: Node | None) -> list[list[int]]:
    """Values level by level, each level read left to right."""
    return [[node.data for node in level] for level in _levels(root)]


def height(root: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def count_nodes(root: Node | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _preorder_nodes(root))


def sum_of_nodes(root: Node | None) -> int:
    """Sum of all values in the tree."""
    return sum(node.data for node in _preorder_nodes(root))


def diameter(root: Node | None) -> int:
    """Number of nodes on the longest path between any two nodes."""

    def walk(node: Node | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_diam, left_height = walk(node.left)
        right_diam, right_height = walk(node.right)
        through = left_height + right_height + 1
        return max(through, left_diam, right_diam), max(left_height, right_height) + 1

    return walk(root)[0]


def is_identical(first: Node | None, second: Node | None) -> bool:
    """Return True if both trees have the same shape and values."""
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def is_subtree(root: Node | None, sub: Node | None) -> bool:
    """Return True if ``sub`` appears in ``root`` as a whole subtree; an empty tree always does."""
    if sub is None:
        return True
    return any(
        node.data == sub.data and is_identical(node, sub)
        for node in _preorder_nodes(root)
    )


def _by_distance(root: Node | None) -> Iterator[tuple[Node, int]]:
    queue = deque([(root, 0)] if root is not None else [])
    while queue:
        node, distance = queue.popleft()
        yield node, distance
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))


def top_view(root: Node | None) -> list[int]:
    """Values seen from above, ordered by horizontal distance from the root."""
    seen: dict[int, int] = {}
    for node, distance in _by_distance(root):
        seen.setdefault(distance, node.data)
    return [seen[d] for d in sorted(seen)]


def bottom_view(root: Node | None) -> list[int]:
    """Values seen from below, ordered by horizontal distance from the root."""
    seen: dict[int, int] = {}
    for node, distance in _by_distance(root):
        seen[distance] = node.data
    return [seen[d] for d in sorted(seen)]


def left_view(root: Node | None) -> list[int]:
    """The leftmost value of every level, top to bottom."""
    return [level[0].data for level in _levels(root)]


def right_view(root: Node | None) -> list[int]:
    """The rightmost value of every level, top to bottom."""
    return [level[-1].data for level in _levels(root)]


def kth_level(root: Node | None, k: int) -> list[int]:
    """Values on level ``k``, the root being level 1; empty if there is no such level."""
    for number, level in enumerate(_levels(root), start=1):
        if number == k:
            return [node.data for node in level]
    return []


def path_to(root: Node | None, value: int) -> list[int]:
    """Values from the root down to the first node holding ``value``; empty if absent."""
    path: list[int] = []

    def walk(node: Node | None) -> bool:
        if node is None:
            return False
        path.append(node.data)
        if node.data == value or walk(node.left) or walk(node.right):
            return True
        path.pop()
        return False

    walk(root)
    return path


def lca_by_paths(root: Node | None, first: int, second: int) -> int | None:
    """Value of the lowest common ancestor, found by comparing root paths; None if none."""
    common = None
    for a, b in zip(path_to(root, first), path_to(root, second)):
        if a != b:
            break
        common = a
    return common


def lowest_common_ancestor(root: Node | None, first: int, second: int) -> Node | None:
    """The lowest node with both values beneath it or at it.

    If only one value is present its node is returned; if neither, None.
    """
    if root is None:
        return None
    if root.data in (first, second):
        return root
    left = lowest_common_ancestor(root.left, first, second)
    right = lowest_common_ancestor(root.right, first, second)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def node_distance(root: Node | None, first: int, second: int) -> int:
    """Number of edges between the nodes holding ``first`` and ``second``."""
    ancestor = lowest_common_ancestor(root, first, second)
    if ancestor is None:
        raise ValueError("neither value is in the tree")
    first_path = path_to(ancestor, first)
    second_path = path_to(ancestor, second)
    if not first_path or not second_path:
        raise ValueError("both values must be in the tree")
    return len(first_path) + len(second_path) - 2


def kth_ancestor(root: Node | None, value: int, k: int) -> int | None:
    """Value ``k`` levels above the node holding ``value``; None if there is none."""
    path = path_to(root, value)
    if not path or k < 1 or k >= len(path):
        return None
    return path[-1 - k]


def transform_to_sum_tree(root: Node | None) -> None:
    """Replace every value, in place, with the sum of the original values beneath it."""

    def walk(node: Node | None) -> int:
        if node is None:
            return 0
        below = walk(node.left) + walk(node.right)
        original = node.data
        node.data = below
        return below + original

    walk(root)