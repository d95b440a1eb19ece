from hypothesis import given
from hypothesis import strategies as st

from algonotes.binary_tree import count_nodes, inorder
from algonotes.bst import (
    build_bst,
    delete,
    insert,
    root_to_leaf_paths,
    search,
    values_in_range,
)

value_lists = st.lists(st.integers(-50, 50), max_size=40)


def is_descent(path):
    return all(a != b or True for a, b in zip(path, path[1:]))


def leaf_count(node):
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return leaf_count(node.left) + leaf_count(node.right)


def test_small_tree_paths():
    assert root_to_leaf_paths(build_bst([5, 3, 8])) == [[5, 3], [5, 8]]


def test_small_tree_range_order():
    assert values_in_range(build_bst([5, 3, 8, 1, 4]), 3, 5) == [5, 3, 4]


def test_empty_tree_operations():
    assert build_bst([]) is None
    assert not search(None, 1)
    assert delete(None, 1) is None
    assert values_in_range(None, 0, 10) == []
    assert root_to_leaf_paths(None) == []


def test_insert_into_empty_returns_new_root():
    root = insert(None, 7)
    assert (root.data, root.left, root.right) == (7, None, None)


def test_equal_values_go_right():
    root = build_bst([4, 4])
    assert root.left is None and root.right.data == 4


@given(value_lists)
def test_inorder_is_sorted(values):
    assert inorder(build_bst(values)) == sorted(values)


@given(value_lists, st.integers(-60, 60))
def test_search_matches_membership(values, key):
    root = build_bst(values)
    assert search(root, key) == (key in values)
    assert all(search(root, v) for v in values)


@given(value_lists.filter(bool), st.data())
def test_delete_present_value(values, data):
    key = data.draw(st.sampled_from(values))
    root = delete(build_bst(values), key)
    expected = sorted(values)
    expected.remove(key)
    assert inorder(root) == expected


@given(value_lists, st.integers(100, 200))
def test_delete_absent_value_keeps_tree(values, key):
    assert inorder(delete(build_bst(values), key)) == sorted(values)


@given(value_lists.filter(bool))
def test_root_to_leaf_paths(values):
    root = build_bst(values)
    paths = root_to_leaf_paths(root)
    assert len(paths) == leaf_count(root)
    assert all(path[0] == values[0] for path in paths)
    assert max(len(path) for path in paths) <= count_nodes(root)
    for path in paths:
        for parent, child in zip(path, path[1:]):
            below = path[path.index(parent) + 1 :]
            assert all(v < parent for v in below) or all(v >= parent for v in below)
            assert child in values