"""String algorithms: matching, windows, palindromes, anagrams and decoding."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Dict, Iterable, List


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` uses exactly the same letters as ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def _failure_table(pattern: str) -> List[int]:
    """Length of the longest proper border of each prefix of ``pattern``."""
    table = [0] * len(pattern)
    border = 0
    for i, char in enumerate(pattern[1:], start=1):
        while border and char != pattern[border]:
            border = table[border - 1]
        if char == pattern[border]:
            border += 1
        table[i] = border
    return table


def find_substring(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or -1.

    An empty pattern is found at index 0.
    """
    if not pattern:
        return 0
    table = _failure_table(pattern)
    matched = 0
    for index, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = table[matched - 1]
        if char == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                return index - matched + 1
    return -1


def length_of_longest_substring(s: str) -> int:
    """Length of the longest run of ``s`` with no repeated character."""
    last_seen: Dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def count_and_say(n: int) -> str:
    """The ``n``-th term (1-based) of the count-and-say sequence."""
    if n < 1:
        raise ValueError("n must be at least 1")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def first_unique_char(s: str) -> int:
    """Index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)


def longest_substring_k(s: str, k: int) -> int:
    """Length of the longest substring in which every character occurs at least ``k`` times."""

    def solve(segment: str) -> int:
        counts = Counter(segment)
        rare = {char for char, count in counts.items() if count < k}
        if not rare:
            return len(segment)
        parts: List[str] = []
        current: List[str] = []
        for char in segment:
            if char in rare:
                if current:
                    parts.append("".join(current))
                    current = []
            else:
                current.append(char)
        if current:
            parts.append("".join(current))
        return max(map(solve, parts), default=0)

    return solve(s)


def fizz_buzz(n: int) -> List[str]:
    """The FizzBuzz words for ``1..n``."""

    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def wildcard_match(s: str, pattern: str) -> bool:
    """Match ``s`` against a pattern where ``?`` is any one character and ``*`` any run."""
    si = pi = 0
    star = -1
    resume = 0
    while si < len(s):
        if pi < len(pattern) and pattern[pi] in ("?", s[si]):
            si += 1
            pi += 1
        elif pi < len(pattern) and pattern[pi] == "*":
            star = pi
            pi += 1
            resume = si
        elif star != -1:
            pi = star + 1
            resume += 1
            si = resume
        else:
            return False
    while pi < len(pattern) and pattern[pi] == "*":
        pi += 1
    return pi == len(pattern)


def group_anagrams(words: Iterable[str]) -> List[List[str]]:
    """Group words that are anagrams of one another.

    Groups appear in the order their first word appears; words keep their order.
    """
    groups: Dict[str, List[str]] = {}
    for word in words:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def longest_palindrome(s: str) -> str:
    """The longest palindromic substring; the leftmost one among equals."""

    def span(left: int, right: int) -> int:
        while left >= 0 and right < len(s) and s[left] == s[right]:
            left -= 1
            right += 1
        return right - left - 1

    best_start = best_len = 0
    for center in range(len(s)):
        length = max(span(center, center), span(center, center + 1))
        if length > best_len:
            best_start = center - (length - 1) // 2
            best_len = length
    return s[best_start:best_start + best_len]


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t`` with multiplicity.

    Returns an empty string when there is none.
    """
    if not t:
        return ""
    need = Counter(t)
    missing = len(t)
    begin = 0
    best_start, best_len = 0, None
    for end, char in enumerate(s, start=1):
        if need[char] > 0:
            missing -= 1
        need[char] -= 1
        while missing == 0:
            if best_len is None or end - begin < best_len:
                best_start, best_len = begin, end - begin
            head = s[begin]
            need[head] += 1
            if need[head] > 0:
                missing += 1
            begin += 1
    return "" if best_len is None else s[best_start:best_start + best_len]


def num_decodings(s: str) -> int:
    """Ways to read a digit string as letters with ``A=1 .. Z=26``."""
    after_next, after = 0, 1  # ways for s[i+2:], s[i+1:]
    for i in range(len(s) - 1, -1, -1):
        ways = after if s[i] != "0" else 0
        if i + 1 < len(s) and (s[i] == "1" or (s[i] == "2" and s[i + 1] < "7")):
            ways += after_next
        after_next, after = after, ways
    return after