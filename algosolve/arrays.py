"""Problems on arrays and sequences of numbers."""

from __future__ import annotations

import heapq
from collections import Counter
from functools import lru_cache
from itertools import accumulate
from operator import xor
from typing import Iterable, Sequence

_MOD = 1_000_000_007


class KthLargest:
    """Track the ``k``-th largest value of a growing stream of numbers."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._heap: list[int] = []
        for num in nums:
            self._push(num)

    def _push(self, val: int) -> None:
        heapq.heappush(self._heap, val)
        if len(self._heap) > self.k:
            heapq.heappop(self._heap)

    def add(self, val: int) -> int:
        """Add ``val`` to the stream and return the current ``k``-th largest value."""
        self._push(val)
        return self._heap[0]


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct combination of candidates, each used once, summing to ``target``."""
    values = sorted(candidates)
    found: list[list[int]] = []

    def search(start: int, remaining: int, path: list[int]) -> None:
        if remaining < 0:
            return
        if remaining == 0:
            found.append(list(path))
            return
        for index in range(start, len(values)):
            if index > start and values[index] == values[index - 1]:
                continue
            path.append(values[index])
            search(index + 1, remaining - values[index], path)
            path.pop()

    search(0, target, [])
    return found


def smallest_range(nums: Sequence[Sequence[int]]) -> list[int]:
    """Return the narrowest range ``[low, high]`` holding a number from every sorted list."""
    if not nums or any(not row for row in nums):
        raise ValueError("every list must hold at least one number")
    heap = [(row[0], i, 0) for i, row in enumerate(nums)]
    heapq.heapify(heap)
    low = heap[0][0]
    high = max(row[0] for row in nums)
    best_low, best_high = low, high

    while len(heap) == len(nums):
        _, i, j = heapq.heappop(heap)
        if j + 1 < len(nums[i]):
            value = nums[i][j + 1]
            heapq.heappush(heap, (value, i, j + 1))
            high = max(high, value)
            low = heap[0][0]
            if high - low < best_high - best_low:
                best_low, best_high = low, high

    return [best_low, best_high]


def _pairs_within(nums: Sequence[int], limit: int) -> int:
    count = 0
    j = 1
    for i, value in enumerate(nums):
        while j < len(nums) and nums[j] <= value + limit:
            j += 1
        count += j - i - 1
    return count


def smallest_distance_pair(nums: Iterable[int], k: int) -> int:
    """Return the ``k``-th smallest absolute difference over all pairs of numbers."""
    values = sorted(nums)
    if len(values) < 2:
        raise ValueError("at least two numbers are needed")
    low, high = 0, values[-1] - values[0]
    while low < high:
        mid = (low + high) // 2
        if _pairs_within(values, mid) >= k:
            high = mid
        else:
            low = mid + 1
    return low


def lemonade_change(bills: Iterable[int]) -> bool:
    """Tell whether a five-dollar stand can give change to every customer in turn."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            fives -= 1
            tens += 1
        elif tens > 0:
            tens -= 1
            fives -= 1
        else:
            fives -= 3
        if fives < 0:
            return False
    return True


def max_width_ramp(nums: Sequence[int]) -> int:
    """Return the largest ``j - i`` with ``i < j`` and ``nums[i] <= nums[j]``."""
    stack: list[int] = []
    for index, value in enumerate(nums):
        if not stack or value < nums[stack[-1]]:
            stack.append(index)
    widest = 0
    for j in reversed(range(len(nums))):
        while stack and nums[j] >= nums[stack[-1]]:
            widest = max(widest, j - stack.pop())
    return widest


def stone_game_ii(piles: Sequence[int]) -> int:
    """Return the most stones the first player can take when both play optimally."""
    n = len(piles)
    if n == 0:
        return 0
    suffix = list(accumulate(reversed(piles)))[::-1]

    @lru_cache(maxsize=None)
    def best(i: int, m: int) -> int:
        if i + 2 * m >= n:
            return suffix[i]
        opponent = min(best(i + x, max(m, x)) for x in range(1, 2 * m + 1))
        return suffix[i] - min(opponent, suffix[i])

    return best(0, 1)


def xor_queries(arr: Sequence[int], queries: Iterable[Sequence[int]]) -> list[int]:
    """Answer each ``[left, right]`` query with the xor of ``arr[left..right]``."""
    prefix = list(accumulate(arr, xor, initial=0))
    return [prefix[left] ^ prefix[right + 1] for left, right in queries]


def can_be_equal(target: Iterable[int], arr: Iterable[int]) -> bool:
    """Tell whether ``arr`` can be turned into ``target`` by reversing subarrays."""
    return sorted(target) == sorted(arr)


def can_arrange(arr: Iterable[int], k: int) -> bool:
    """Tell whether the numbers split into pairs whose sums are divisible by ``k``."""
    remainders = Counter(value % k for value in arr)
    if remainders[0] % 2:
        return False
    return all(remainders[r] == remainders[k - r] for r in range(1, k // 2 + 1))


def range_sum(nums: Sequence[int], n: int, left: int, right: int) -> int:
    """Sum positions ``left`` to ``right`` (1-based) of the sorted subarray sums, mod 1e9+7."""
    sums = sorted(
        total for i in range(n) for total in accumulate(nums[i:n])
    )
    return sum(sums[left - 1:right]) % _MOD


def chalk_replacer(chalk: Sequence[int], k: int) -> int:
    """Return the index of the student who runs out of chalk first."""
    total = sum(chalk)
    if total <= 0:
        raise ValueError("the students must use some chalk")
    k %= total
    for index, used in enumerate(chalk):
        k -= used
        if k < 0:
            return index
    raise AssertionError("unreachable")


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Pick one cell per row maximising the sum minus the column distances moved."""
    width = len(points[0])
    best = [0] * width
    for row in points:
        from_left = list(accumulate(best, lambda run, value: max(run - 1, value)))
        from_right = list(
            accumulate(reversed(best), lambda run, value: max(run - 1, value))
        )[::-1]
        best = [
            max(left, right) + value
            for left, right, value in zip(from_left, from_right, row)
        ]
    return max(best)


def smallest_chair(times: Sequence[Sequence[int]], target_friend: int) -> int:
    """Return the chair the target friend sits on when each takes the lowest free one."""
    arrivals = sorted((arrival, leaving, i) for i, (arrival, leaving) in enumerate(times))
    next_unused = 0
    free: list[int] = []
    occupied: list[tuple[int, int]] = []

    for arrival, leaving, friend in arrivals:
        while occupied and occupied[0][0] <= arrival:
            heapq.heappush(free, heapq.heappop(occupied)[1])
        if friend == target_friend:
            return free[0] if free else next_unused
        if free:
            heapq.heappush(occupied, (leaving, heapq.heappop(free)))
        else:
            heapq.heappush(occupied, (leaving, next_unused))
            next_unused += 1

    raise ValueError("target_friend is not among the friends")


def construct_2d_array(original: Sequence[int], m: int, n: int) -> list[list[int]]:
    """Reshape ``original`` into ``m`` rows of ``n``; empty when the sizes disagree."""
    if len(original) != m * n:
        return []
    return [list(original[row * n:(row + 1) * n]) for row in range(m)]


def missing_rolls(rolls: Sequence[int], mean: int, n: int) -> list[int]:
    """Return ``n`` die rolls that bring the mean of all rolls to ``mean``, or []."""
    missing = (len(rolls) + n) * mean - sum(rolls)
    if missing > n * 6 or missing < n:
        return []
    base, extra = divmod(missing, n)
    return [base + 1] * extra + [base] * (n - extra)


def min_swaps(nums: Sequence[int]) -> int:
    """Return the fewest swaps that gather all ones together in a circular array."""
    ones = sum(nums)
    n = len(nums)
    window = sum(nums[:ones])
    best = window
    for i in range(ones, n + ones):
        window += nums[i % n] - nums[i - ones]
        best = max(best, window)
    return ones - best


def min_groups(intervals: Iterable[Sequence[int]]) -> int:
    """Return the fewest groups that hold the inclusive intervals without overlap."""
    pairs = list(intervals)
    starts = sorted(start for start, _ in pairs)
    ends = sorted(end for _, end in pairs)
    open_groups = most = 0
    j = 0
    for start in starts:
        while start > ends[j]:
            open_groups -= 1
            j += 1
        open_groups += 1
        most = max(most, open_groups)
    return most


def longest_subarray(nums: Iterable[int]) -> int:
    """Return the length of the longest run of the maximum value."""
    longest = run = 0
    peak = None
    for value in nums:
        if peak is None or value > peak:
            peak, run, longest = value, 1, 1
        elif value == peak:
            run += 1
            longest = max(longest, run)
        else:
            run = 0
    return longest