import pytest

from algosolve.nodes import NaryNode, TreeNode, build_tree
from algosolve.trees import (
    inorder_traversal,
    is_symmetric,
    max_depth,
    nary_postorder,
    postorder_traversal,
    sorted_array_to_bst,
)


def _mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, _mirror(node.right), _mirror(node.left))


def test_inorder_example():
    assert inorder_traversal(build_tree([1, None, 2, 3])) == [1, 3, 2]


def test_postorder_example():
    assert postorder_traversal(build_tree([1, None, 2, 3])) == [3, 2, 1]


def test_traversals_of_empty_tree():
    assert inorder_traversal(None) == []
    assert postorder_traversal(None) == []
    assert nary_postorder(None) == []


@pytest.mark.parametrize("values", [[4, 2, 6, 1, 3, 5, 7], [1], [3, 9, 20, None, None, 15, 7]])
def test_traversal_invariants(values):
    root = build_tree(values)
    post = postorder_traversal(root)
    assert post[-1] == root.val
    assert sorted(post) == sorted(inorder_traversal(root))
    assert inorder_traversal(_mirror(root)) == inorder_traversal(root)[::-1]


def test_nary_postorder_example():
    root = NaryNode(1, [NaryNode(3, [NaryNode(5), NaryNode(6)]), NaryNode(2), NaryNode(4)])
    assert nary_postorder(root) == [5, 6, 3, 2, 4, 1]


def test_nary_postorder_chain():
    root = NaryNode(1, [NaryNode(2, [NaryNode(3)])])
    assert nary_postorder(root) == [3, 2, 1]


def test_symmetric_when_right_mirrors_left():
    subtree = build_tree([2, 3, 4, None, 5])
    assert is_symmetric(TreeNode(1, subtree, _mirror(subtree)))


def test_not_symmetric_when_right_copies_left():
    subtree = build_tree([2, 3, 4])
    assert not is_symmetric(TreeNode(1, subtree, build_tree([2, 3, 4])))


def test_not_symmetric_with_one_child():
    assert not is_symmetric(TreeNode(1, TreeNode(2)))
    assert is_symmetric(None)
    assert is_symmetric(TreeNode(1))


def test_max_depth_empty_and_chain():
    assert max_depth(None) == 0
    chain = None
    for value in range(6):
        chain = TreeNode(value, chain)
    assert max_depth(chain) == 6


@pytest.mark.parametrize("n", [0, 1, 2, 5, 7, 8, 31, 100])
def test_sorted_array_to_bst_is_balanced_search_tree(n):
    nums = list(range(-n, n, 2))[:n]
    root = sorted_array_to_bst(nums)
    assert inorder_traversal(root) == nums
    assert max_depth(root) == n.bit_length()


def test_sorted_array_to_bst_root_is_middle():
    nums = [-10, -3, 0, 5, 9]
    assert sorted_array_to_bst(nums).val == nums[2]