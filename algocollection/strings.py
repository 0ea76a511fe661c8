"""String problems: arithmetic on digit strings, anagrams, run-length and palindromes."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from itertools import groupby

_DIGITS = "0123456789"


def _digits(number: str) -> list[int]:
    if any(ch not in _DIGITS for ch in number):
        raise ValueError(f"not a non-negative decimal number: {number!r}")
    return [ord(ch) - ord("0") for ch in number]


def multiply(num1: str, num2: str) -> str:
    """Multiply two non-negative numbers given as decimal digit strings."""
    a = _digits(num1)
    b = _digits(num2)
    product = [0] * (len(a) + len(b))
    for i, x in enumerate(reversed(a)):
        carry = 0
        for j, y in enumerate(reversed(b)):
            carry, product[i + j] = divmod(product[i + j] + x * y + carry, 10)
        product[i + len(b)] += carry
    return "".join(map(str, reversed(product))).lstrip("0") or "0"


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def compress(chars: MutableSequence[str]) -> int:
    """Run-length encode ``chars`` in place and return the encoded length.

    Each run becomes its character followed by its length when that is
    more than one. Items beyond the encoded length are left as they were.
    """
    packed: list[str] = []
    for ch, run in groupby(chars):
        count = sum(1 for _ in run)
        packed.append(ch)
        if count > 1:
            packed.extend(str(count))
    chars[: len(packed)] = packed
    return len(packed)


def count_palindromic_substrings(s: str) -> int:
    """Count the substrings of ``s``, by position, that read the same backwards."""
    n = len(s)
    total = 0
    for center in range(2 * n - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < n and s[left] == s[right]:
            total += 1
            left -= 1
            right += 1
    return total


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether ``goal`` is a rotation of ``s``."""
    return len(s) == len(goal) and goal in s + s


def largest_odd_number(num: str) -> str:
    """Return the longest prefix of a digit string that is an odd number, or ``""``."""
    return num.rstrip("02468")