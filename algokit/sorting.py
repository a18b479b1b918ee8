"""Comparison sorts and a divide-and-conquer minimum/maximum search."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with the items of ``values`` in ascending order."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a new list sorted by repeatedly selecting the smallest remaining item."""
    result = list(values)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a new list sorted by top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for i in range(low, high):
        if items[i] <= pivot:
            items[i], items[boundary] = items[boundary], items[i]
            boundary += 1
    items[high], items[boundary] = items[boundary], items[high]
    return boundary


def _quicksort(items: list[Any], low: int, high: int) -> None:
    # Recurse into the smaller side and loop over the larger one to bound depth.
    while low < high:
        pivot = _partition(items, low, high)
        if pivot - low < high - pivot:
            _quicksort(items, low, pivot - 1)
            low = pivot + 1
        else:
            _quicksort(items, pivot + 1, high)
            high = pivot - 1


def quicksort(values: Iterable[T]) -> list[T]:
    """Return a new list sorted by quicksort with the last element as pivot."""
    items = list(values)
    _quicksort(items, 0, len(items) - 1)
    return items


def _min_max(items: list[T], low: int, high: int) -> tuple[T, T]:
    if low == high:
        return items[low], items[low]
    if low + 1 == high:
        if items[low] < items[high]:
            return items[low], items[high]
        return items[high], items[low]
    mid = (low + high) // 2
    left_min, left_max = _min_max(items, low, mid)
    right_min, right_max = _min_max(items, mid + 1, high)
    smallest = right_min if right_min < left_min else left_min
    largest = right_max if right_max > left_max else left_max
    return smallest, largest


def min_max(values: Iterable[T]) -> tuple[T, T]:
    """Return ``(minimum, maximum)`` found by splitting the sequence in halves.

    Raises ValueError for an empty input.
    """
    items = list(values)
    if not items:
        raise ValueError("min_max() of an empty sequence")
    return _min_max(items, 0, len(items) - 1)