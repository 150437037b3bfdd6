"""Comparison sorts: insertion sort (iterative and recursive) and merge sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _insert_last(items: list[Any], last: int) -> None:
    """Shift ``items[last]`` left into the already sorted ``items[:last]``."""
    key = items[last]
    position = last
    while position > 0 and items[position - 1] > key:
        items[position] = items[position - 1]
        position -= 1
    items[position] = key


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list of ``values`` using insertion sort, O(n^2)."""
    items = list(values)
    for last in range(1, len(items)):
        _insert_last(items, last)
    return items


def recursive_insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list: sort the prefix recursively, then insert the last.

    The recursion depth equals the number of elements.
    """
    items = list(values)

    def sort_through(last: int) -> None:
        if last > 0:
            sort_through(last - 1)
            _insert_last(items, last)

    sort_through(len(items) - 1)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list of ``values`` using stable merge sort, O(n lg n)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))