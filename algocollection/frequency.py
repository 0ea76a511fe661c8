"""Majority and duplicate queries over integer lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def majority_element(nums: Sequence[int]) -> int:
    """Return the value that occurs more than ``len(nums) // 2`` times, or -1."""
    limit = len(nums) // 2
    counts: Counter[int] = Counter()
    for value in nums:
        counts[value] += 1
        if counts[value] > limit:
            return value
    return -1


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return every value occurring more than ``len(nums) // 3`` times.

    Values appear in the order of their first occurrence.
    """
    limit = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > limit]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    return len(set(nums)) < len(nums)


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the first value seen for a second time, or -1."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return value
        seen.add(value)
    return -1


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Return each repeat occurrence in a list whose values lie in 1..len(nums).

    A value is reported once per extra occurrence, in the order those
    occurrences appear.
    """
    n = len(nums)
    seen: set[int] = set()
    duplicates: list[int] = []
    for value in nums:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} is outside 1..{n}")
        if value in seen:
            duplicates.append(value)
        else:
            seen.add(value)
    return duplicates