import pytest

from algokit.arrays import (
    find_duplicate,
    find_duplicate_binary_search,
    find_duplicate_cycle,
    first_missing_positive,
    merge_sorted_into,
    move_zeroes,
    plus_one,
    product_except_self,
    remove_duplicates,
    reverse_in_place,
    sort_colors,
    wiggle_sort,
)


@pytest.mark.parametrize(
    "values, expected",
    [([0, 0, 1, 1, 1, 2, 2, 3, 3, 4], 5), ([1], 1), ([1, 2, 3], 3)],
)
def test_remove_duplicates(values, expected):
    nums = list(values)
    count = remove_duplicates(nums)
    assert count == expected
    assert nums[:count] == sorted(set(values))


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == 0


@pytest.mark.parametrize(
    "values, expected",
    [
        ([0, 1, 0, 3, 12], [1, 3, 12, 0, 0]),
        ([0], [0]),
        ([1], [1]),
        ([0, 1], [1, 0]),
    ],
)
def test_move_zeroes(values, expected):
    nums = list(values)
    move_zeroes(nums)
    assert nums == expected


def test_reverse_in_place():
    chars = ["h", "e", "l", "l", "o"]
    reverse_in_place(chars)
    assert chars == ["o", "l", "l", "e", "h"]


def test_reverse_twice_restores():
    chars = list("abcdef")
    reverse_in_place(chars)
    reverse_in_place(chars)
    assert chars == list("abcdef")


def test_plus_one_carries():
    digits = [9, 9, 9]
    result = plus_one(digits)
    assert result == [1, 0, 0, 0]
    assert digits is result


def test_plus_one_matches_integer_increment():
    for number in (0, 7, 19, 123, 4099):
        digits = [int(c) for c in str(number)]
        result = plus_one(digits)
        assert int("".join(map(str, result))) == number + 1


def test_merge_sorted_into():
    nums1 = [1, 2, 3, 0, 0, 0]
    merge_sorted_into(nums1, 3, [2, 5, 6], 3)
    assert nums1 == [1, 2, 2, 3, 5, 6]


def test_merge_sorted_into_empty_first():
    nums1 = [0, 0]
    merge_sorted_into(nums1, 0, [4, 8], 2)
    assert nums1 == [4, 8]


def test_merge_sorted_into_no_room():
    with pytest.raises(ValueError):
        merge_sorted_into([1], 1, [2], 1)


@pytest.mark.parametrize(
    "values, expected",
    [([2, 0, 2, 1, 1, 0], [0, 0, 1, 1, 2, 2]), ([2, 0, 1], [0, 1, 2])],
)
def test_sort_colors(values, expected):
    nums = list(values)
    sort_colors(nums)
    assert nums == expected


@pytest.mark.parametrize(
    "values, expected",
    [([1, 5, 1, 1, 6, 4], [1, 6, 1, 5, 1, 4]), ([1, 3, 2, 2, 3, 1], [2, 3, 1, 3, 1, 2])],
)
def test_wiggle_sort(values, expected):
    nums = list(values)
    wiggle_sort(nums)
    assert nums == expected


def test_wiggle_sort_invariant():
    nums = [4, 5, 5, 6, 1, 2, 3]
    original = sorted(nums)
    wiggle_sort(nums)
    assert sorted(nums) == original
    for i in range(len(nums) - 1):
        if i % 2 == 0:
            assert nums[i] < nums[i + 1]
        else:
            assert nums[i] > nums[i + 1]


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 0], 3), ([2147483647], 1), ([3, 4, -1, 1], 2), ([7, 8, 9, 11, 12], 1)],
)
def test_first_missing_positive(values, expected):
    nums = list(values)
    assert first_missing_positive(nums) == expected
    assert nums == values


@pytest.mark.parametrize(
    "finder", [find_duplicate, find_duplicate_binary_search, find_duplicate_cycle]
)
@pytest.mark.parametrize("values", [[1, 3, 4, 2, 2], [2, 2, 2, 2, 2]])
def test_find_duplicate(finder, values):
    nums = list(values)
    assert finder(nums) == 2
    assert nums == values


@pytest.mark.parametrize(
    "finder", [find_duplicate, find_duplicate_binary_search, find_duplicate_cycle]
)
def test_find_duplicate_rejects_out_of_range(finder):
    with pytest.raises(ValueError):
        finder([1, 5, 2])


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3, 4], [24, 12, 8, 6]), ([-1, 1, 0, -3, 3], [0, 0, 9, 0, 0])],
)
def test_product_except_self(values, expected):
    assert product_except_self(values) == expected


def test_product_except_self_empty():
    assert product_except_self([]) == []