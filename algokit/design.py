"""Small data structures: running median, random set, shuffler, flattening."""

from __future__ import annotations

import heapq
import random
from typing import Any, Dict, Iterable, Iterator, List, Optional


class MedianFinder:
    """Keep the median of a stream of numbers."""

    def __init__(self) -> None:
        self._low: List[int] = []  # max heap, values negated
        self._high: List[int] = []  # min heap

    def add_num(self, num: int) -> None:
        if not self._low or num < -self._low[0]:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)

        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) > len(self._low) + 1:
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        if not self._low and not self._high:
            raise ValueError("no numbers have been added")
        if len(self._low) == len(self._high):
            return (-self._low[0] + self._high[0]) / 2.0
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return float(self._high[0])


class RandomizedSet:
    """A set with constant-time insert, remove and random choice."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._positions: Dict[int, int] = {}
        self._values: List[int] = []
        self._rng = rng or random.Random()

    def insert(self, val: int) -> bool:
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        position = self._positions.pop(val, None)
        if position is None:
            return False
        last = self._values.pop()
        if position < len(self._values):
            self._values[position] = last
            self._positions[last] = position
        return True

    def choice(self) -> int:
        if not self._values:
            raise IndexError("choice from an empty set")
        return self._rng.choice(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions


class Shuffler:
    """Produce random permutations of a fixed sequence."""

    def __init__(self, nums: Iterable[int], rng: Optional[random.Random] = None) -> None:
        self._original = list(nums)
        self._rng = rng or random.Random()

    def reset(self) -> List[int]:
        return list(self._original)

    def shuffle(self) -> List[int]:
        shuffled = list(self._original)
        for i in range(len(shuffled) - 1, -1, -1):
            j = self._rng.randrange(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled


def flatten(nested: Iterable[Any]) -> Iterator[int]:
    """Yield the integers of an arbitrarily nested list, left to right."""
    stack: List[Iterator[Any]] = [iter(nested)]
    while stack:
        for item in stack[-1]:
            if isinstance(item, int):
                yield item
            else:
                stack.append(iter(item))
                break
        else:
            stack.pop()