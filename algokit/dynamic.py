"""Dynamic programming: counting paths, subsequences, coins and squares."""

from __future__ import annotations

import math
from bisect import bisect_left
from functools import lru_cache
from typing import List, Sequence

_square_counts: List[int] = [0]


def _check_coins(coins: Sequence[int], amount: int) -> None:
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")


def num_squares(n: int) -> int:
    """Fewest perfect squares that sum to ``n``.

    Results are kept between calls, so later calls reuse earlier work.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    while len(_square_counts) <= n:
        m = len(_square_counts)
        best = min(
            _square_counts[m - i * i] + 1 for i in range(1, math.isqrt(m) + 1)
        )
        _square_counts.append(best)
    return _square_counts[n]


def unique_paths(m: int, n: int) -> int:
    """Paths from the top-left to the bottom-right of an ``m`` by ``n`` grid.

    Only moves right and down are allowed.
    """
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be at least 1")
    return math.comb(m + n - 2, m - 1)


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time; 0 steps give 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 2:
        return n
    before, current = 1, 2
    for _ in range(n - 2):
        before, current = current, before + current
    return current


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence.

    Fills the take-or-skip table over (position, previous taken index).
    """
    n = len(nums)
    # following[p + 1]: best length from position i + 1 on, previous taken index p
    following = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        current = [0] * (n + 1)
        for prev in range(-1, i):
            skip = following[prev + 1]
            take = 0
            if prev == -1 or nums[i] > nums[prev]:
                take = 1 + following[i + 1]
            current[prev + 1] = max(take, skip)
        following = current
    return following[0]


def length_of_lis_quadratic(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence in O(n^2) time."""
    ending: List[int] = []
    for i, value in enumerate(nums):
        ending.append(
            1 + max((ending[j] for j in range(i) if nums[j] < value), default=0)
        )
    return max(ending, default=0)


def length_of_lis_patience(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence in O(n log n) time."""
    tails: List[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, or -1 if it cannot be made."""
    _check_coins(coins, amount)
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if coin <= total:
                best[total] = min(best[total], 1 + best[total - coin])
    return -1 if best[amount] == unreachable else best[amount]


def coin_change_recursive(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount`` by memoised recursion, or -1."""
    _check_coins(coins, amount)
    values = tuple(coins)

    @lru_cache(maxsize=None)
    def fewest(remaining: int, kinds: int) -> float:
        if remaining == 0:
            return 0
        if kinds == 0:
            return math.inf
        result = fewest(remaining, kinds - 1)
        coin = values[kinds - 1]
        if coin <= remaining:
            result = min(result, 1 + fewest(remaining - coin, kinds))
        return result

    count = fewest(amount, len(values))
    return -1 if count == math.inf else int(count)


def coin_change_table(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount`` using a table over coin kinds, or -1."""
    _check_coins(coins, amount)
    n = len(coins)
    unreachable = amount + 1
    table = [[0] * (n + 1)] + [[unreachable] * (n + 1) for _ in range(amount)]
    for total in range(1, amount + 1):
        row = table[total]
        for j, coin in enumerate(coins, start=1):
            row[j] = row[j - 1]
            if coin <= total:
                row[j] = min(row[j - 1], 1 + table[total - coin][j])
    return -1 if table[amount][n] == unreachable else table[amount][n]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Right-and-down paths across a grid where non-zero cells are blocked."""
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    cols = len(grid[0])
    ways = [0] * cols
    ways[0] = 1
    for row in grid:
        for j, blocked in enumerate(row):
            if blocked:
                ways[j] = 0
            elif j > 0:
                ways[j] += ways[j - 1]
    return ways[-1]


def longest_increasing_path(matrix: Sequence[Sequence[int]]) -> int:
    """Length of the longest strictly increasing path moving up, down, left or right."""
    if not matrix or not matrix[0]:
        return 0
    rows, cols = len(matrix), len(matrix[0])
    cells = sorted(
        ((r, c) for r in range(rows) for c in range(cols)),
        key=lambda cell: matrix[cell[0]][cell[1]],
        reverse=True,
    )
    length = [[1] * cols for _ in range(rows)]
    for r, c in cells:
        value = matrix[r][c]
        for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if 0 <= nr < rows and 0 <= nc < cols and matrix[nr][nc] > value:
                length[r][c] = max(length[r][c], 1 + length[nr][nc])
    return max(max(row) for row in length)