import random

import pytest

from algokit.scanning import (
    can_jump,
    count_smaller,
    four_sum_count,
    increasing_triplet,
    intersect,
    largest_rectangle_area,
    max_sliding_window,
    max_subarray,
    merge_intervals,
    missing_number,
    top_k_frequent,
    trap,
)


def test_max_sliding_window_example():
    assert max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3) == [3, 3, 5, 5, 6, 7]


def test_max_sliding_window_invariants():
    rng = random.Random(7)
    nums = [rng.randint(-50, 50) for _ in range(40)]
    k = 5
    result = max_sliding_window(nums, k)
    assert len(result) == len(nums) - k + 1
    for start, value in enumerate(result):
        window = nums[start : start + k]
        assert value in window
        assert all(value >= other for other in window)


def test_max_sliding_window_rejects_zero_width():
    with pytest.raises(ValueError):
        max_sliding_window([1, 2], 0)


def test_max_sliding_window_width_one_is_identity():
    nums = [4, -2, 9, 0]
    assert max_sliding_window(nums, 1) == nums


@pytest.mark.parametrize(
    "nums, expected",
    [([3, 0, 1], 2), ([0, 1], 2), ([9, 6, 4, 2, 3, 5, 7, 0, 1], 8)],
)
def test_missing_number(nums, expected):
    assert missing_number(nums) == expected


def test_missing_number_from_shuffled_range():
    rng = random.Random(3)
    values = list(range(30))
    gone = values.pop(17)
    rng.shuffle(values)
    assert missing_number(values) == gone


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 4, 5], True), ([5, 4, 3, 2, 1], False), ([2, 1, 5, 0, 4, 6], True)],
)
def test_increasing_triplet(nums, expected):
    assert increasing_triplet(nums) is expected


def test_top_k_frequent_example():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [2, 1]


def test_top_k_frequent_rejects_large_k():
    with pytest.raises(ValueError):
        top_k_frequent([1, 1, 2], 3)


def test_intersect_examples():
    assert intersect([1, 2, 2, 1], [2, 2]) == [2, 2]
    assert intersect([4, 9, 5], [9, 4, 9, 8, 4]) == [9, 4]


def test_intersect_is_bounded_by_both_inputs():
    a = [1, 1, 2, 3, 3, 3]
    b = [3, 1, 3, 5, 1, 1]
    result = intersect(a, b)
    for value in set(result):
        assert result.count(value) <= min(a.count(value), b.count(value))


def test_max_subarray_example():
    assert max_subarray([5, 4, -1, 7, 8]) == 23


def test_max_subarray_all_negative_picks_largest():
    nums = [-8, -3, -6]
    assert max_subarray(nums) == max(nums)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


def test_can_jump_examples():
    assert can_jump([2, 3, 1, 1, 4]) is True
    assert can_jump([3, 2, 1, 0, 4]) is False


def test_merge_intervals_examples():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [
        [1, 6],
        [8, 10],
        [15, 18],
    ]
    assert merge_intervals([[1, 4], [4, 5]]) == [[1, 5]]


def test_merge_intervals_result_is_disjoint_and_covers_input():
    intervals = [[5, 7], [1, 2], [6, 9], [3, 3], [2, 3]]
    merged = merge_intervals(intervals)
    for (_, end), (start, _) in zip(merged, merged[1:]):
        assert end < start
    for start, end in intervals:
        assert any(lo <= start and end <= hi for lo, hi in merged)


def test_four_sum_count_example():
    assert four_sum_count([1, 2], [-2, -1], [-1, 2], [0, 2]) == 2


@pytest.mark.parametrize(
    "height, expected",
    [([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1], 6), ([4, 2, 0, 3, 2, 5], 9)],
)
def test_trap(height, expected):
    assert trap(height) == expected


@pytest.mark.parametrize(
    "heights, expected",
    [([2, 1, 5, 6, 2, 3], 10), ([4, 2, 0, 3, 2, 5], 6)],
)
def test_largest_rectangle_area(heights, expected):
    assert largest_rectangle_area(heights) == expected


def test_count_smaller_examples():
    assert count_smaller([5, 2, 6, 1]) == [2, 1, 1, 0]
    assert count_smaller([-1, -1]) == [0, 0]


def test_count_smaller_totals_inversions_and_keeps_input():
    rng = random.Random(11)
    nums = [rng.randint(-20, 20) for _ in range(60)]
    snapshot = list(nums)
    result = count_smaller(nums)
    assert nums == snapshot
    assert len(result) == len(nums)
    assert result[-1] == 0
    ascending = sorted(nums)
    assert all(c == 0 for c in count_smaller(ascending))