"""Integer and digit arithmetic."""

from __future__ import annotations

from math import isqrt
from typing import Sequence

_UINT32 = 0xFFFFFFFF


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as decimal digits, most significant first."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def my_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, or 0 when ``x`` is not positive."""
    return isqrt(x) if x > 0 else 0


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 1, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def nth_ugly_number(n: int) -> int:
    """Return the ``n``-th number whose only prime factors are 2, 3 and 5."""
    ugly = [1]
    i2 = i3 = i5 = 0
    while len(ugly) < n:
        next2, next3, next5 = ugly[i2] * 2, ugly[i3] * 3, ugly[i5] * 5
        following = min(next2, next3, next5)
        if following == next2:
            i2 += 1
        if following == next3:
            i3 += 1
        if following == next5:
            i5 += 1
        ugly.append(following)
    return ugly[-1]


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` up to its highest set bit."""
    if num <= 0:
        return num
    return num ^ ((1 << num.bit_length()) - 1)


def min_steps(n: int) -> int:
    """Return the fewest copy-all and paste operations that produce ``n`` characters."""
    if n <= 1:
        return 0
    steps = list(range(n + 1))
    for i in range(2, n + 1):
        for j in range(i // 2, 2, -1):
            if i % j == 0:
                steps[i] = steps[j] + i // j
                break
    return steps[n]


def min_bit_flips(start: int, goal: int) -> int:
    """Count the bits that differ between two 32-bit unsigned numbers."""
    return bin((start ^ goal) & _UINT32).count("1")