"""Enumerating permutations and subsets by backtracking."""

from __future__ import annotations

from typing import Iterator, List, Sequence


def permute(nums: Sequence[int]) -> List[List[int]]:
    """All orderings of ``nums``, generated by swapping each value into place."""
    work = list(nums)
    result: List[List[int]] = []

    def place(begin: int) -> None:
        if begin >= len(work):
            result.append(list(work))
            return
        for i in range(begin, len(work)):
            work[begin], work[i] = work[i], work[begin]
            place(begin + 1)
            work[begin], work[i] = work[i], work[begin]

    place(0)
    return result


def permute_unique(nums: Sequence[int]) -> List[List[int]]:
    """All distinct orderings of ``nums``, in lexicographic order.

    An empty input gives no orderings.
    """
    if not nums:
        return []
    result: List[List[int]] = []

    def place(begin: int, work: List[int]) -> None:
        if begin == len(work) - 1:
            result.append(work)
            return
        for i in range(begin, len(work)):
            if i != begin and (work[i] == work[begin] or work[i] == work[i - 1]):
                continue
            work[begin], work[i] = work[i], work[begin]
            place(begin + 1, list(work))

    place(0, sorted(nums))
    return result


def subsets(nums: Sequence[int]) -> List[List[int]]:
    """Every subset of ``nums``, each in input order, in depth-first order."""
    values = list(nums)

    def extend(begin: int, chosen: List[int]) -> Iterator[List[int]]:
        yield list(chosen)
        for i in range(begin, len(values)):
            chosen.append(values[i])
            yield from extend(i + 1, chosen)
            chosen.pop()

    return list(extend(0, []))