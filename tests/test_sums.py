import math

import pytest

from algocollection.sums import (
    max_product,
    max_subarray,
    min_subarray,
    product_except_self,
    three_sum,
    two_sum,
    two_sum_sorted,
)


def _pairs(flat):
    return list(zip(flat[::2], flat[1::2]))


@pytest.mark.parametrize(
    "numbers, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([1, 2, 3, 4], 5)],
)
def test_two_sum_pairs_add_up(numbers, target):
    result = two_sum(numbers, target)
    assert len(result) % 2 == 0
    assert result
    for i, j in _pairs(result):
        assert i < j
        assert numbers[i] + numbers[j] == target


def test_two_sum_reports_every_pair_in_order():
    numbers = [1, 2, 3, 4]
    pairs = _pairs(two_sum(numbers, 5))
    assert pairs == sorted(pairs)
    assert len(pairs) == len(set(pairs))
    assert all(numbers[i] + numbers[j] == 5 for i, j in pairs)
    assert len(pairs) == 2


def test_two_sum_without_match():
    assert two_sum([1, 2, 3], 100) == []


def test_three_sum_worked_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


@pytest.mark.parametrize(
    "nums",
    [[-1, 0, 1, 2, -1, -4], [0, 0, 0, 0], [-4, -2, -2, 0, 1, 2, 2, 3, 4, 6], [-2, 0, 1, 1, 2]],
)
def test_three_sum_invariants(nums):
    original = list(nums)
    result = three_sum(nums)
    assert nums == original
    assert result
    for triple in result:
        assert sum(triple) == 0
        assert triple == sorted(triple)
    assert len({tuple(t) for t in result}) == len(result)
    assert result == sorted(result)


def test_three_sum_without_result():
    assert three_sum([0, 1, 1]) == []
    assert three_sum([1]) == []


def test_two_sum_sorted_worked_example():
    assert two_sum_sorted([2, 7, 11, 15], 9) == [1, 2]


@pytest.mark.parametrize(
    "numbers, target", [([2, 3, 4], 6), ([-1, 0], -1), ([1, 3, 5, 8, 13], 16)]
)
def test_two_sum_sorted_positions_are_one_based(numbers, target):
    first, second = two_sum_sorted(numbers, target)
    assert 1 <= first < second <= len(numbers)
    assert numbers[first - 1] + numbers[second - 1] == target


def test_two_sum_sorted_without_match():
    assert two_sum_sorted([1, 2, 3], 10) == []


def test_max_subarray_worked_example():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


@pytest.mark.parametrize("nums", [[5, 4, -1, 7, 8], [1], [-3, 2, -1, 4], [0, 0, 0]])
def test_max_subarray_bounds(nums):
    result = max_subarray(nums)
    assert result >= max(nums)
    assert result >= sum(nums)


def test_max_subarray_all_negative_is_largest_element():
    nums = [-8, -3, -6, -2, -5]
    assert max_subarray(nums) == max(nums)


def test_max_subarray_all_positive_is_total():
    nums = [3, 1, 4, 1, 5]
    assert max_subarray(nums) == sum(nums)


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray([])


@pytest.mark.parametrize("value", [-7, 0, 9])
def test_max_product_single(value):
    assert max_product([value]) == value


def test_max_product_all_positive_is_total_product():
    nums = [2, 3, 4, 5]
    assert max_product(nums) == math.prod(nums)


def test_max_product_two_negatives_cancel():
    nums = [-2, -3, -4]
    assert max_product(nums) == nums[1] * nums[2]


@pytest.mark.parametrize("nums", [[2, 3, -2, 4], [-2, 0, -1], [-2, 3, -4]])
def test_max_product_at_least_largest_element(nums):
    assert max_product(nums) >= max(nums)


def test_max_product_empty():
    with pytest.raises(ValueError):
        max_product([])


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [-1, 1, -3, 3], [5], [2, 2]])
def test_product_except_self_without_zero(nums):
    total = math.prod(nums)
    result = product_except_self(nums)
    assert len(result) == len(nums)
    for value, product in zip(nums, result):
        assert value * product == total


def test_product_except_self_single_zero():
    nums = [-1, 1, 0, -3, 3]
    result = product_except_self(nums)
    zero_at = nums.index(0)
    others = nums[:zero_at] + nums[zero_at + 1:]
    assert result[zero_at] == math.prod(others)
    assert all(v == 0 for i, v in enumerate(result) if i != zero_at)


def test_product_except_self_empty():
    assert product_except_self([]) == []


def _removable(nums, length, p):
    total = sum(nums)
    return any(
        (total - sum(nums[start:start + length])) % p == 0
        for start in range(len(nums) - length + 1)
    )


@pytest.mark.parametrize(
    "nums, p", [([3, 1, 4, 2], 6), ([6, 3, 5, 2], 9), ([8, 32, 31, 18, 34, 20, 21, 13], 6)]
)
def test_min_subarray_removal_works(nums, p):
    length = min_subarray(nums, p)
    assert 0 < length < len(nums)
    assert _removable(nums, length, p)


def test_min_subarray_already_divisible():
    assert min_subarray([1, 2, 3], 3) == 0


def test_min_subarray_impossible():
    assert min_subarray([1, 2, 3], 7) == -1


def test_min_subarray_bad_modulus():
    with pytest.raises(ValueError):
        min_subarray([1, 2], 0)