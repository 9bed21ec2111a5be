"""Traversals and constructions on binary and n-ary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional, Sequence

from algosolve.nodes import NaryNode, TreeNode


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of a binary tree in left, node, right order."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of a binary tree in left, right, node order."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    values.reverse()
    return values


def nary_postorder(root: Optional[NaryNode]) -> list[int]:
    """Return the values of an n-ary tree with every child before its parent."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        stack.extend(node.children)
    values.reverse()
    return values


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether a binary tree is a mirror image of itself."""
    if root is None:
        return True
    pairs = [(root.left, root.right)]
    while pairs:
        left, right = pairs.pop()
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
        pairs.append((left.left, right.right))
        pairs.append((left.right, right.left))
    return True


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    depth = 0
    level = deque([root] if root is not None else [])
    while level:
        depth += 1
        for _ in range(len(level)):
            node = level.popleft()
            level.extend(c for c in (node.left, node.right) if c is not None)
    return depth


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted values."""

    def build(left: int, right: int) -> Optional[TreeNode]:
        if left > right:
            return None
        mid = left + (right - left) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)