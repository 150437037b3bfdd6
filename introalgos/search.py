"""Searching a sequence for a key."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

NOT_FOUND = -1


def linear_search(values: Sequence[Any], key: Any) -> int:
    """Return the index of the first element equal to ``key``, or -1 if absent.

    Runs in O(n) and needs no ordering on the elements.
    """
    return next(
        (index for index, value in enumerate(values) if value == key),
        NOT_FOUND,
    )


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending ``values``, or -1 if absent.

    Iterative halving of the search range, O(lg n).
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        probe = values[mid]
        if probe == key:
            return mid
        if probe < key:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def recursive_binary_search(values: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending ``values``, or -1 if absent.

    Same probing order as :func:`binary_search`, expressed recursively.
    """

    def search(low: int, high: int) -> int:
        if low > high:
            return NOT_FOUND
        mid = (low + high) // 2
        probe = values[mid]
        if probe == key:
            return mid
        if probe < key:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(values) - 1)