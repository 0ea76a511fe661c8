"""Rearranging, merging and combining integer lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def remove_duplicates(nums: list[int]) -> int:
    """Keep the first occurrence of each value in ``nums``, in place.

    Returns the number of values left.
    """
    nums[:] = dict.fromkeys(nums)
    return len(nums)


def sort_colors(nums: list[int]) -> None:
    """Sort ``nums`` in place in ascending order."""
    nums.sort()


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` items of ``nums2`` into the first ``m`` of ``nums1``.

    The sorted result fills the first ``m + n`` slots of ``nums1``, which
    must be at least that long.
    """
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    nums1[: m + n] = sorted([*nums1[:m], *nums2[:n]])


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    split = len(nums) - k % len(nums)
    nums[:] = nums[split:] + nums[:split]


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end of ``nums``, keeping the order of the rest."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return the common values of both lists, with multiplicity, ascending."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def frequency_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` in place by rising frequency, ties by falling value.

    Returns the same list.
    """
    counts = Counter(nums)
    nums.sort(key=lambda value: (counts[value], -value))
    return nums


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive distinct values."""
    longest = 0
    run = 0
    previous = None
    for value in sorted(set(nums)):
        run = run + 1 if previous is not None and value == previous + 1 else 1
        longest = max(longest, run)
        previous = value
    return longest


def earliest_full_bloom(plant_time: Sequence[int], grow_time: Sequence[int]) -> int:
    """Return the first day on which every seed is in bloom.

    Seeds are planted one at a time, longest growing first.
    """
    if len(plant_time) != len(grow_time):
        raise ValueError("plant_time and grow_time must have the same length")
    planted = 0
    finish = 0
    for grow, plant in sorted(zip(grow_time, plant_time), reverse=True):
        planted += plant
        finish = max(finish, planted + grow)
    return finish