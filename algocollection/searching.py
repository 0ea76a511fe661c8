"""Binary searches and order queries over integer lists."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Sequence


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated ascending list of distinct values.

    Returns its index, or -1 if it is absent.
    """
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours.

    Positions outside the list count as lower than anything. Returns 0 for
    lists of fewer than two items and -1 if the search finds no peak.
    """
    n = len(nums)
    if n < 2 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid - 1] > nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def dominant_index(nums: Sequence[int]) -> int:
    """Index of the largest value if it is at least twice every other one, else -1."""
    if not nums:
        return -1
    largest = max(nums)
    covered = sum(1 for value in nums if largest >= 2 * value)
    if covered == len(nums) - 1:
        return nums.index(largest)
    return -1


def count_smaller(nums: Sequence[int]) -> list[int]:
    """For each position, count the smaller values to its right."""
    seen: list[int] = []
    counts: list[int] = []
    for value in reversed(nums):
        counts.append(bisect_left(seen, value))
        insort(seen, value)
    counts.reverse()
    return counts