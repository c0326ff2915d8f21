"""Linear scans over sequences: windows, counting, intervals and histograms."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from typing import Deque, Iterable, List, Sequence, Tuple


def max_sliding_window(nums: Sequence[int], k: int) -> List[int]:
    """Maximum of every window of ``k`` consecutive values, left to right.

    A window wider than the input yields no results.
    """
    if k < 1:
        raise ValueError("window size must be at least 1")
    window: Deque[int] = deque()
    result: List[int] = []
    for right, value in enumerate(nums):
        if window and window[0] == right - k:
            window.popleft()
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(right)
        if right >= k - 1:
            result.append(nums[window[0]])
    return result


def missing_number(nums: Sequence[int]) -> int:
    """The one value of ``0..n`` absent from ``n`` distinct numbers."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def increasing_triplet(nums: Iterable[int]) -> bool:
    """Tell whether some ``i < j < k`` have ``nums[i] < nums[j] < nums[k]``."""
    smallest = second = float("inf")
    for value in nums:
        if value <= smallest:
            smallest = value
        elif value <= second:
            second = value
        else:
            return True
    return False


def top_k_frequent(nums: Iterable[int], k: int) -> List[int]:
    """The ``k`` most frequent values, least frequent of them first.

    Among values of equal frequency the larger value ranks higher.
    """
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must lie in 0..{len(counts)}")
    ranked: List[Tuple[int, int]] = heapq.nlargest(
        k, ((count, value) for value, count in counts.items())
    )
    return [value for _, value in reversed(ranked)]


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> List[int]:
    """Values common to both, each as often as it appears in both.

    The result follows the order of ``nums2``.
    """
    available = Counter(nums1)
    result: List[int] = []
    for value in nums2:
        if available[value] > 0:
            result.append(value)
            available[value] -= 1
    return result


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty run of consecutive values."""
    if not nums:
        raise ValueError("need at least one number")
    current = best = nums[0]
    for value in nums[1:]:
        current = current + value if current > 0 else value
        best = max(best, current)
    return best


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable from the first.

    Each value is the longest jump allowed from its position.
    """
    farthest = 0
    last = len(nums) - 1
    for index, step in enumerate(nums):
        if farthest < index:
            return False
        farthest = max(farthest, index + step)
        if farthest > last:
            return True
    return True


def merge_intervals(intervals: Iterable[Sequence[int]]) -> List[List[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals, sorted by start."""
    merged: List[List[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def four_sum_count(
    a: Iterable[int], b: Iterable[int], c: Iterable[int], d: Iterable[int]
) -> int:
    """Number of index tuples whose four values, one from each list, sum to zero."""
    b_values = list(b)
    d_values = list(d)
    pair_sums = Counter(x + y for x in a for y in b_values)
    return sum(pair_sums.get(-(x + y), 0) for x in c for y in d_values)


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    left, right = 0, len(height) - 1
    level = 0
    total = 0
    while left < right:
        while left < right and height[left] <= level:
            total += level - height[left]
            left += 1
        while left < right and height[right] <= level:
            total += level - height[right]
            right -= 1
        level = min(height[left], height[right])
    return total


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under a histogram."""
    best = 0
    stack: List[int] = []
    n = len(heights)
    for i in range(n + 1):
        current = heights[i] if i < n else 0
        while stack and current < heights[stack[-1]]:
            top = stack.pop()
            width = i - stack[-1] - 1 if stack else i
            best = max(best, heights[top] * width)
        stack.append(i)
    return best


def count_smaller(nums: Sequence[int]) -> List[int]:
    """For each position, how many later values are strictly smaller."""
    counts = [0] * len(nums)

    def sort_counting(pairs: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
        if len(pairs) <= 1:
            return pairs
        mid = len(pairs) // 2
        left = sort_counting(pairs[:mid])
        right = sort_counting(pairs[mid:])
        merged: List[Tuple[int, int]] = []
        j = 0
        for value, index in left:
            while j < len(right) and right[j][0] < value:
                merged.append(right[j])
                j += 1
            counts[index] += j
            merged.append((value, index))
        merged.extend(right[j:])
        return merged

    sort_counting([(value, index) for index, value in enumerate(nums)])
    return counts