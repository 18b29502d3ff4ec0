"""Classic comparison and counting sorts, plus inversion counting.

Every sort takes any iterable and returns a new ascending list; the input
is never modified.
"""

from __future__ import annotations

import operator
from itertools import combinations
from typing import Iterable, List, TypeVar

T = TypeVar("T")

__all__ = [
    "bubble_sort",
    "exchange_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "selection_sort",
    "counting_sort",
    "cycle_sort",
    "count_inversions",
]


def bubble_sort(values: Iterable[T]) -> List[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for settled in range(1, len(items)):
        swapped = False
        for j in range(len(items) - settled):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def exchange_sort(values: Iterable[T]) -> List[T]:
    """Sort by comparing each position with every later one and swapping."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> List[T]:
    """Sort with an in-place binary max-heap."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[T]) -> List[T]:
    """Sort by inserting each element into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: List[T], right: List[T]) -> List[T]:
    merged: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> List[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def selection_sort(values: Iterable[T]) -> List[T]:
    """Sort by moving the minimum of the unsorted suffix to its front."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def counting_sort(values: Iterable[int]) -> List[int]:
    """Sort small non-negative integers by counting occurrences.

    Raises TypeError for non-integers and ValueError for negative values.
    """
    items = [operator.index(value) for value in values]
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    result: List[int] = []
    for value, count in enumerate(counts):
        result.extend([value] * count)
    return result


def cycle_sort(values: Iterable[T]) -> List[T]:
    """Sort by rotating each cycle of misplaced elements into place."""
    items = list(values)
    n = len(items)

    def position(start: int, item: T) -> int:
        return start + sum(1 for other in items[start + 1:] if other < item)

    for start in range(n - 1):
        item = items[start]
        pos = position(start, item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = position(start, item)
            while item == items[pos]:
                pos += 1
            if item != items[pos]:
                items[pos], item = item, items[pos]
    return items


def count_inversions(values: Iterable[T]) -> int:
    """Count pairs i < j whose elements are out of order."""
    return sum(1 for first, second in combinations(list(values), 2) if first > second)