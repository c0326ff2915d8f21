"""In-place and linear-time algorithms over integer sequences."""

from __future__ import annotations

from typing import List, MutableSequence, Sequence


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so its distinct values come first.

    Returns how many distinct values there are. The items past that count
    are left as they were.
    """
    if not nums:
        return 0
    last = 0
    for value in nums[1:]:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end, keeping the order of the other values."""
    write = 0
    for value in list(nums):
        if value != 0:
            nums[write] = value
            write += 1
    for i in range(write, len(nums)):
        nums[i] = 0


def reverse_in_place(chars: MutableSequence[str]) -> None:
    """Reverse a mutable sequence in place."""
    left, right = 0, len(chars) - 1
    while left < right:
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1


def plus_one(digits: List[int]) -> List[int]:
    """Add one to the number whose decimal digits are given, most significant first.

    The list is updated in place and also returned.
    """
    for index in range(len(digits) - 1, -1, -1):
        if digits[index] == 9:
            digits[index] = 0
        else:
            digits[index] += 1
            return digits
    digits.insert(0, 1)
    return digits


def merge_sorted_into(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` items of ``nums2`` into ``nums1``.

    ``nums1`` holds ``m`` sorted values followed by room for ``n`` more.
    """
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    i, j = m - 1, n - 1
    for write in range(m + n - 1, -1, -1):
        if j < 0:
            break
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[write] = nums1[i]
            i -= 1
        else:
            nums1[write] = nums2[j]
            j -= 1


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in one pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def wiggle_sort(nums: MutableSequence[int]) -> None:
    """Reorder so that ``nums[0] < nums[1] > nums[2] < nums[3] ...``.

    The largest values go to the odd positions, in descending order, and the
    rest fill the even positions, also in descending order.
    """
    descending = sorted(nums, reverse=True)
    n = len(nums)
    odd_count = n // 2
    nums[1::2] = descending[:odd_count]
    nums[0::2] = descending[odd_count:]


def first_missing_positive(nums: Sequence[int]) -> int:
    """Return the smallest positive integer not present in ``nums``."""
    slots = list(nums)
    n = len(slots)
    for i in range(n):
        while 0 < slots[i] <= n and slots[i] != slots[slots[i] - 1]:
            target = slots[i] - 1
            slots[i], slots[target] = slots[target], slots[i]
    for position, value in enumerate(slots, start=1):
        if value != position:
            return position
    return n + 1


def _check_duplicate_input(nums: Sequence[int]) -> None:
    if len(nums) < 2:
        raise ValueError("need at least two numbers")
    limit = len(nums) - 1
    if any(not 1 <= value <= limit for value in nums):
        raise ValueError(f"values must lie in 1..{limit}")


def find_duplicate(nums: Sequence[int]) -> int:
    """Find the repeated value among ``n + 1`` numbers drawn from ``1..n``.

    Marks seen values by flipping signs in a working copy.
    """
    _check_duplicate_input(nums)
    marks = list(nums)
    for value in marks:
        index = abs(value) - 1
        marks[index] = -marks[index]
        if marks[index] > 0:
            return abs(value)
    raise ValueError("no value repeats")


def find_duplicate_binary_search(nums: Sequence[int]) -> int:
    """Find the repeated value by binary search over the value range."""
    _check_duplicate_input(nums)
    low, high = 1, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        count = sum(1 for value in nums if value <= mid)
        if count > mid:
            high = mid
        else:
            low = mid + 1
    return low


def find_duplicate_cycle(nums: Sequence[int]) -> int:
    """Find the repeated value with Floyd's cycle detection."""
    _check_duplicate_input(nums)
    fast = slow = nums[0]
    while True:
        fast = nums[nums[fast]]
        slow = nums[slow]
        if fast == slow:
            break
    slow = nums[0]
    while fast != slow:
        fast = nums[fast]
        slow = nums[slow]
    return fast


def product_except_self(nums: Sequence[int]) -> List[int]:
    """For each position, the product of every other value."""
    result = [1] * len(nums)
    prefix = 1
    for i, value in enumerate(nums):
        result[i] = prefix
        prefix *= value
    suffix = 1
    for i in range(len(nums) - 1, -1, -1):
        result[i] *= suffix
        suffix *= nums[i]
    return result