"""Pair, triple and subarray sum and product problems over integer lists."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def two_sum(numbers: Sequence[int], target: int) -> list[int]:
    """Return the indices of every pair adding up to ``target``, flattened.

    Pairs appear in order of their first index, then their second, so a
    single matching pair gives ``[i, j]`` with ``i < j``.
    """
    result: list[int] = []
    for (i, a), (j, b) in combinations(enumerate(numbers), 2):
        if a + b == target:
            result.extend((i, j))
    return result


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of values that sums to zero.

    Each triple is in ascending order and the triples are in ascending
    order of their values. The input is left untouched.
    """
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n - 2):
        first = values[i]
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, n - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Find a pair adding up to ``target`` in an ascending list.

    Returns the two 1-based positions, or an empty list if there is none.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_product() needs at least one number")
    high = low = best = nums[0]
    for value in nums[1:]:
        if value < 0:
            high, low = low, high
        high = max(value, high * value)
        low = min(value, low * value)
        best = max(best, high)
    return best


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    output: list[int] = []
    running = 1
    for value in nums:
        output.append(running)
        running *= value
    running = 1
    for i in reversed(range(len(nums))):
        output[i] *= running
        running *= nums[i]
    return output


def min_subarray(nums: Sequence[int], p: int) -> int:
    """Length of the shortest subarray whose removal leaves a sum divisible by ``p``.

    Returns 0 if the sum is already divisible and -1 if only removing the
    whole list would do.
    """
    if p <= 0:
        raise ValueError("p must be a positive integer")
    total = sum(nums) % p
    if total == 0:
        return 0
    last_seen = {0: -1}
    prefix = 0
    best = len(nums)
    for i, value in enumerate(nums):
        prefix = (prefix + value) % p
        wanted = (prefix - total) % p
        if wanted in last_seen:
            best = min(best, i - last_seen[wanted])
        last_seen[prefix] = i
    return -1 if best == len(nums) else best