"""Binary searches over sorted, rotated and two-dimensional data."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left, bisect_right
from itertools import islice
from typing import List, Sequence, Tuple


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Look for ``target`` in a matrix whose rows and columns are both ascending."""
    if not matrix or not matrix[0]:
        return False
    rows, cols = len(matrix), len(matrix[0])
    r, c = 0, cols - 1
    while r < rows and c >= 0:
        value = matrix[r][c]
        if value == target:
            return True
        if value > target:
            c -= 1
        else:
            r += 1
    return False


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending list of distinct values, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[0]:
            if nums[0] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        else:
            if nums[mid] < target <= nums[-1]:
                left = mid + 1
            else:
                right = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> Tuple[int, int]:
    """First and last index of ``target`` in a sorted list, or ``(-1, -1)``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (-1, -1)
    return (first, bisect_right(nums, target, lo=first) - 1)


def kth_smallest(matrix: Sequence[Sequence[int]], k: int) -> int:
    """The ``k``-th smallest value (1-based) of a square matrix sorted by rows and columns."""
    n = len(matrix)
    if n == 0:
        raise ValueError("matrix is empty")
    if not 1 <= k <= n * n:
        raise ValueError(f"k must lie in 1..{n * n}")
    low, high = matrix[0][0], matrix[-1][-1]
    while low < high:
        mid = (low + high) // 2
        count = sum(bisect_right(row, mid) for row in matrix)
        if count < k:
            low = mid + 1
        else:
            high = mid
    return low


def median_of_sorted(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of two sorted lists taken together, by partitioning the shorter one.

    Two empty lists give 0.
    """
    longer, shorter = (nums1, nums2) if len(nums1) >= len(nums2) else (nums2, nums1)
    total = len(longer) + len(shorter)
    if total == 0:
        return 0.0
    if not shorter:
        return (longer[(total - 1) // 2] + longer[total // 2]) / 2

    low, high = 0, len(shorter)
    while low <= high:
        cut2 = (low + high) // 2
        cut1 = (total + 1) // 2 - cut2
        left1 = longer[cut1 - 1] if cut1 > 0 else -math.inf
        left2 = shorter[cut2 - 1] if cut2 > 0 else -math.inf
        right1 = longer[cut1] if cut1 < len(longer) else math.inf
        right2 = shorter[cut2] if cut2 < len(shorter) else math.inf
        if left1 > right2:
            low = cut2 + 1
        elif left2 > right1:
            high = cut2 - 1
        elif total % 2 == 0:
            return (max(left1, left2) + min(right1, right2)) / 2
        else:
            return float(max(left1, left2))
    raise ValueError("inputs must be sorted")


def median_of_sorted_merge(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of two sorted lists taken together, by walking their merge.

    Two empty lists give 0.
    """
    total = len(nums1) + len(nums2)
    if total == 0:
        return 0.0
    low_index, high_index = (total - 1) // 2, total // 2
    middle: List[int] = list(
        islice(heapq.merge(nums1, nums2), low_index, high_index + 1)
    )
    return (middle[0] + middle[-1]) / 2


def int_sqrt(x: int) -> int:
    """Integer square root, rounded down."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)