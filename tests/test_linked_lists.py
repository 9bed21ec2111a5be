from math import gcd

import pytest

from algosolve.linked_lists import (
    insert_greatest_common_divisors,
    is_sub_path,
    merge_two_lists,
    modified_list,
    spiral_matrix,
    split_list_to_parts,
)
from algosolve.nodes import ListNode, TreeNode, build_list, build_tree, list_values


@pytest.mark.parametrize(
    "first, second",
    [([1, 2, 4], [1, 3, 4]), ([], []), ([], [0]), ([5], [1, 2, 3]), ([1, 1], [1])],
)
def test_merge_gives_sorted_union(first, second):
    merged = merge_two_lists(build_list(first), build_list(second))
    assert list_values(merged) == sorted(first + second)


def test_merge_prefers_first_list_on_ties():
    a = ListNode(1)
    b = ListNode(1)
    merged = merge_two_lists(a, b)
    assert merged is a
    assert merged.next is b


@pytest.mark.parametrize(
    "values, k", [([1, 2, 3], 5), (list(range(1, 11)), 3), ([], 2), ([7], 1)]
)
def test_split_parts_invariants(values, k):
    parts = split_list_to_parts(build_list(values), k)
    assert len(parts) == k
    sizes = [len(list_values(part)) for part in parts]
    assert max(sizes) - min(sizes) <= 1
    assert sizes == sorted(sizes, reverse=True)
    assert [v for part in parts for v in list_values(part)] == values


def test_split_more_parts_than_nodes_leaves_none():
    parts = split_list_to_parts(build_list([1, 2]), 4)
    assert parts[2] is None and parts[3] is None


def test_split_rejects_zero_parts():
    with pytest.raises(ValueError):
        split_list_to_parts(build_list([1]), 0)


def test_sub_path_found_along_tree_path():
    root = build_tree([1, 4, 4, None, 2, 2, None, 1, None, 6, 8])
    path = [root.left.val, root.left.right.val, root.left.right.left.val]
    assert is_sub_path(build_list(path), root)


def test_sub_path_with_absent_value():
    root = build_tree([1, 2, 3])
    assert not is_sub_path(build_list([1, 99]), root)


def test_sub_path_must_go_downward():
    root = build_tree([1, 2, 3])
    assert not is_sub_path(build_list([2, 1]), root)


def test_sub_path_empty_tree_and_empty_list():
    assert not is_sub_path(build_list([1]), None)
    assert is_sub_path(None, TreeNode(1))


def test_spiral_small_square():
    assert spiral_matrix(2, 2, build_list([1, 2, 3, 4])) == [[1, 2], [4, 3]]


def test_spiral_fills_first_row_then_pads():
    values = list(range(10, 20))
    grid = spiral_matrix(3, 5, build_list(values))
    assert grid[0] == values[:5]
    flat = [cell for row in grid for cell in row]
    assert flat.count(-1) == 15 - len(values)
    assert sorted(c for c in flat if c != -1) == values


def test_spiral_empty_list():
    assert spiral_matrix(2, 3, None) == [[-1] * 3, [-1] * 3]


def test_spiral_rejects_overflowing_list():
    with pytest.raises(ValueError):
        spiral_matrix(1, 2, build_list([1, 2, 3]))


@pytest.mark.parametrize("values", [[18, 6, 10, 3], [7], [12, 8, 9, 4, 4]])
def test_insert_gcd(values):
    result = list_values(insert_greatest_common_divisors(build_list(values)))
    assert len(result) == 2 * len(values) - 1
    assert result[::2] == values
    assert result[1::2] == [gcd(a, b) for a, b in zip(values, values[1:])]


def test_insert_gcd_empty():
    assert insert_greatest_common_divisors(None) is None


@pytest.mark.parametrize(
    "nums, values",
    [([1, 2, 3], [1, 2, 3, 4, 5]), ([1], [1, 2, 1, 2, 1, 2]), ([5], [1, 2, 3, 4])],
)
def test_modified_list_removes_values(nums, values):
    result = list_values(modified_list(nums, build_list(values)))
    assert result == [v for v in values if v not in nums]