"""Operations on singly linked lists."""

from __future__ import annotations

from math import gcd
from typing import Iterable, Iterator, Optional

from algosolve.nodes import ListNode, TreeNode

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``list1`` first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Cut a list into ``k`` consecutive parts whose sizes differ by at most one."""
    if k < 1:
        raise ValueError("k must be at least 1")
    size, extra = divmod(sum(1 for _ in _nodes(head)), k)
    parts: list[Optional[ListNode]] = []
    node = head
    for index in range(k):
        parts.append(node)
        prev = None
        for _ in range(size + (1 if index < extra else 0)):
            prev, node = node, node.next
        if prev is not None:
            prev.next = None
    return parts


def _matches_downward(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    if head is None:
        return True
    if root is None:
        return False
    return head.val == root.val and (
        _matches_downward(head.next, root.left)
        or _matches_downward(head.next, root.right)
    )


def is_sub_path(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    """Tell whether the list's values appear along some downward path of the tree."""
    if root is None:
        return False
    return (
        _matches_downward(head, root)
        or is_sub_path(head, root.left)
        or is_sub_path(head, root.right)
    )


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """Lay the list's values clockwise into an ``m`` by ``n`` grid filled with -1."""
    grid = [[-1] * n for _ in range(m)]
    values: Iterable[int] = head if head is not None else ()
    x = y = direction = 0
    for placed, value in enumerate(values):
        if placed >= m * n:
            raise ValueError("the list holds more values than the grid has cells")
        grid[x][y] = value
        dx, dy = _DIRECTIONS[direction]
        nx, ny = x + dx, y + dy
        if not (0 <= nx < m and 0 <= ny < n) or grid[nx][ny] != -1:
            direction = (direction + 1) % 4
        dx, dy = _DIRECTIONS[direction]
        x, y = x + dx, y + dy
    return grid


def insert_greatest_common_divisors(head: Optional[ListNode]) -> Optional[ListNode]:
    """Insert between every two adjacent nodes a node holding their gcd."""
    node = head
    while node is not None and node.next is not None:
        inserted = ListNode(gcd(node.val, node.next.val), node.next)
        node.next = inserted
        node = inserted.next
    return head


def modified_list(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove from the list every node whose value is in ``nums``."""
    removed = set(nums)
    dummy = ListNode(0, head)
    prev = dummy
    for node in _nodes(head):
        if node.val in removed:
            prev.next = node.next
        else:
            prev = node
    return dummy.next