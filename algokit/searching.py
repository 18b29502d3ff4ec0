"""Searching in sequences and strings: linear, binary, KMP, two-sum, three-sum."""

from __future__ import annotations

from bisect import bisect_left
from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

__all__ = [
    "linear_search",
    "binary_search",
    "contains_sorted",
    "lps_table",
    "kmp_search",
    "two_sum",
    "three_sum",
]


def linear_search(values: Iterable[T], target: T) -> int:
    """Return the index of the first element equal to ``target``.

    Raises ValueError when the target is absent.
    """
    for index, value in enumerate(values):
        if value == target:
            return index
    raise ValueError(f"{target!r} is not present")


def binary_search(values: Sequence[T], target: T) -> int:
    """Return the index of ``target`` in the ascending sequence ``values``.

    Raises ValueError when the target is absent.
    """
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    raise ValueError(f"{target!r} is not present")


def contains_sorted(values: Iterable[T], target: T) -> bool:
    """Sort ``values`` and report whether ``target`` is among them."""
    items = sorted(values)
    index = bisect_left(items, target)
    return index < len(items) and items[index] == target


def lps_table(pattern: Sequence[Hashable]) -> List[int]:
    """Longest proper prefix that is also a suffix, for every prefix of ``pattern``."""
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def kmp_search(pattern: str, text: str) -> List[int]:
    """Return every start index at which ``pattern`` occurs in ``text``, overlaps included.

    Raises ValueError for an empty pattern.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = lps_table(pattern)
    matches: List[int] = []
    i = j = 0
    while i < len(text):
        if pattern[j] == text[i]:
            i += 1
            j += 1
            if j == len(pattern):
                matches.append(i - j)
                j = table[j - 1]
        elif j:
            j = table[j - 1]
        else:
            i += 1
    return matches


def two_sum(nums: Iterable[int], target: int) -> Optional[Tuple[int, int]]:
    """Return indices ``(i, j)``, ``i < j``, of two elements summing to ``target``.

    Returns None when no such pair exists.
    """
    seen: Dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen[value] = index
    return None


def three_sum(nums: Iterable[int]) -> List[Tuple[int, int, int]]:
    """Return every distinct ascending triple of elements that sums to zero."""
    items = sorted(nums)
    n = len(items)
    result: List[Tuple[int, int, int]] = []
    for i in range(n - 2):
        first = items[i]
        if first > 0:
            break
        if i > 0 and first == items[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + items[j] + items[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append((first, items[j], items[k]))
                k -= 1
                while j < k and items[k] == items[k + 1]:
                    k -= 1
                j += 1
                while j < k and items[j] == items[j - 1]:
                    j += 1
    return result