"""String processing routines."""

from __future__ import annotations

import re
from collections import Counter
from fractions import Fraction
from functools import cmp_to_key
from typing import Iterable, Sequence

_VOWELS = frozenset("aeiouAEIOU")

_BELOW_TWENTY = (
    "", "One", "Two", "Three", "Four",
    "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
)
_TENS = (
    "", "", "Twenty", "Thirty", "Forty",
    "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
)
_SCALES = (
    (1_000_000_000, "Billion"),
    (1_000_000, "Million"),
    (1_000, "Thousand"),
    (100, "Hundred"),
)

_TERM = re.compile(r"([+-]?\d+)/(\d+)")


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    best = start = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1 if absent."""
    return haystack.find(needle)


def _concatenation_order(a: str, b: str) -> int:
    ab, ba = a + b, b + a
    if ab > ba:
        return -1
    if ab < ba:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """Arrange the numbers so that their concatenation is as large as possible."""
    ordered = sorted(map(str, nums), key=cmp_to_key(_concatenation_order))
    result = "".join(ordered)
    return "0" if result.startswith("0") else result


def _spell(num: int) -> str:
    if num < 20:
        return _BELOW_TWENTY[num]
    if num < 100:
        return f"{_TENS[num // 10]} {_BELOW_TWENTY[num % 10]}".strip()
    for scale, name in _SCALES:
        if num >= scale:
            quotient, rest = divmod(num, scale)
            return f"{_spell(quotient)} {name} {_spell(rest)}".strip()
    raise AssertionError("unreachable")


def number_to_words(num: int) -> str:
    """Spell a non-negative integer in English words."""
    if num < 0:
        raise ValueError("num must not be negative")
    if num == 0:
        return "Zero"
    return _spell(num)


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters in place."""
    chars = list(s)
    positions = [index for index, char in enumerate(chars) if char in _VOWELS]
    vowels = [chars[index] for index in reversed(positions)]
    for index, vowel in zip(positions, vowels):
        chars[index] = vowel
    return "".join(chars)


def _palindromes_around(s: str) -> tuple[int, int]:
    num = int(s)
    length = len(s)
    half = s[: (length + 1) // 2]
    candidate = int(half + half[: length // 2][::-1])

    if candidate < num:
        previous = candidate
    else:
        prev_half = str(int(half) - 1)
        mirrored = prev_half[: length // 2][::-1]
        if length % 2 == 0 and int(prev_half) == 0:
            previous = 9
        elif length % 2 == 0 and prev_half == "9":
            previous = int(prev_half + "9" + mirrored)
        else:
            previous = int(prev_half + mirrored)

    if candidate > num:
        following = candidate
    else:
        next_half = str(int(half) + 1)
        following = int(next_half + next_half[: length // 2][::-1])

    return previous, following


def nearest_palindromic(n: str) -> str:
    """Return the palindrome closest to, but not equal to, the number ``n``.

    On a tie the smaller palindrome wins.
    """
    num = int(n)
    previous, following = _palindromes_around(n)
    if abs(previous - num) <= abs(following - num):
        return str(previous)
    return str(following)


def fraction_addition(expression: str) -> str:
    """Evaluate a sum of fractions such as ``-1/2+1/3`` into a reduced ``a/b``."""
    total = sum(
        (Fraction(int(numerator), int(denominator))
         for numerator, denominator in _TERM.findall(expression)),
        Fraction(0),
    )
    return f"{total.numerator}/{total.denominator}"


def strange_printer(s: str) -> int:
    """Return the fewest turns of a printer that prints runs of one character."""
    if not s:
        return 0
    n = len(s)
    turns = [[n] * n for _ in range(n)]
    for j in range(n):
        turns[j][j] = 1
        for i in range(j, -1, -1):
            for k in range(i, j):
                shared = 1 if s[k] == s[j] else 0
                turns[i][j] = min(turns[i][j], turns[i][k] + turns[k + 1][j] - shared)
    return turns[0][n - 1]


def min_add_to_make_valid(s: str) -> int:
    """Count the parentheses that must be added to balance ``s``."""
    open_unmatched = close_unmatched = 0
    for char in s:
        if char == "(":
            open_unmatched += 1
        elif open_unmatched:
            open_unmatched -= 1
        else:
            close_unmatched += 1
    return open_unmatched + close_unmatched


def _digit_sum(num: int) -> int:
    return sum(int(digit) for digit in str(num)) if num > 0 else 0


def get_lucky(s: str, k: int) -> int:
    """Turn letters into their alphabet positions and sum digits ``k`` times."""
    total = 0
    for char in s:
        value = ord(char) - ord("a") + 1
        total += value if value < 10 else value % 10 + value // 10
    for _ in range(k - 1):
        total = _digit_sum(total)
    return total


def kth_distinct(arr: Sequence[str], k: int) -> str:
    """Return the ``k``-th string that occurs exactly once, or "" if there is none."""
    if k < 1:
        raise ValueError("k must be at least 1")
    counts = Counter(arr)
    distinct = [item for item in arr if counts[item] == 1]
    return distinct[k - 1] if k <= len(distinct) else ""


def count_seniors(details: Iterable[str]) -> int:
    """Count passengers older than 60; the age sits at characters 11 and 12."""
    return sum(1 for detail in details if int(detail[11:13]) > 60)


def minimum_pushes(word: str) -> int:
    """Return the fewest key presses to type ``word`` on eight remappable keys."""
    counts = sorted(Counter(word).values(), reverse=True)
    return sum(count * (index // 8 + 1) for index, count in enumerate(counts))