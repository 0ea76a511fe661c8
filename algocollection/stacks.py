"""Monotonic-stack problems: histograms, next greater values and spans."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under a histogram."""
    best = 0
    stack: list[tuple[int, int]] = []  # (bar height, leftmost index it spans)
    for i, height in enumerate([*heights, 0]):
        start = i
        while stack and stack[-1][0] > height:
            top, start = stack.pop()
            best = max(best, top * (i - start))
        stack.append((height, start))
    return best


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest all-``'1'`` rectangle in a grid of ``'0'``/``'1'``."""
    if not matrix or not matrix[0]:
        return 0
    cols = len(matrix[0])
    heights = [0] * cols
    best = 0
    for row in matrix:
        if len(row) != cols:
            raise ValueError("every row of the matrix must have the same length")
        heights = [h + 1 if cell == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the first greater value after it in ``nums2``.

    A value with nothing greater after it maps to -1. Every value of
    ``nums1`` must occur in ``nums2``; for repeated values the last
    occurrence counts.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater.setdefault(value, stack[-1] if stack else -1)
        stack.append(value)
    try:
        return [greater[value] for value in nums1]
    except KeyError as exc:
        raise ValueError(f"value {exc.args[0]} does not occur in nums2") from None


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each value, the first greater value found going round the list, or -1."""
    n = len(nums)
    result = [-1] * n
    pending: list[int] = []
    for i in range(2 * n):
        value = nums[i % n]
        while pending and nums[pending[-1]] < value:
            result[pending.pop()] = value
        if i < n:
            pending.append(i)
    return result


def remove_duplicate_letters(s: str) -> str:
    """Keep one of each character, giving the smallest such subsequence."""
    remaining = Counter(s)
    stack: list[str] = []
    in_stack: set[str] = set()
    for ch in s:
        remaining[ch] -= 1
        if ch in in_stack:
            continue
        while stack and ch < stack[-1] and remaining[stack[-1]] > 0:
            in_stack.discard(stack.pop())
        stack.append(ch)
        in_stack.add(ch)
    return "".join(stack)


class StockSpanner:
    """Reports, for each new price, how many consecutive days it has topped."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []  # (price, span)

    def next(self, price: int) -> int:
        """Record ``price`` and return the number of days back, including
        today, whose price was at most ``price``."""
        span = 1
        while self._stack and self._stack[-1][0] <= price:
            span += self._stack.pop()[1]
        self._stack.append((price, span))
        return span