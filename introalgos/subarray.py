"""Maximum-sum contiguous subarray: divide and conquer, and brute force."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate


@dataclass(frozen=True)
class Subarray:
    """A contiguous run ``values[low:high + 1]`` and its sum."""

    low: int
    high: int
    sum: int


def _best_prefix(sums: list[int]) -> tuple[int, int]:
    """Return (offset, value) of the first maximum of ``sums``."""
    return max(enumerate(sums), key=lambda pair: pair[1])


def find_max_crossing_subarray(
    values: Sequence[int], low: int, mid: int, high: int
) -> Subarray:
    """Return the best subarray of ``values[low:high + 1]`` that spans ``mid`` and ``mid + 1``.

    Requires ``0 <= low <= mid < high < len(values)``.
    """
    if not 0 <= low <= mid < high < len(values):
        raise ValueError(
            f"need 0 <= low <= mid < high < {len(values)}, "
            f"got low={low}, mid={mid}, high={high}"
        )
    left_offset, left_sum = _best_prefix(
        list(accumulate(reversed(values[low : mid + 1])))
    )
    right_offset, right_sum = _best_prefix(
        list(accumulate(values[mid + 1 : high + 1]))
    )
    return Subarray(mid - left_offset, mid + 1 + right_offset, left_sum + right_sum)


def find_max_subarray(values: Sequence[int]) -> Subarray:
    """Return a maximum-sum subarray of ``values`` by divide and conquer, O(n lg n).

    On ties the left half wins over the right, and both over the crossing one.
    """
    if not values:
        raise ValueError("cannot find a subarray of an empty sequence")

    def solve(low: int, high: int) -> Subarray:
        if low == high:
            return Subarray(low, high, values[low])
        mid = (low + high) // 2
        left = solve(low, mid)
        right = solve(mid + 1, high)
        cross = find_max_crossing_subarray(values, low, mid, high)
        if left.sum >= right.sum and left.sum >= cross.sum:
            return left
        if right.sum >= cross.sum:
            return right
        return cross

    return solve(0, len(values) - 1)


def find_max_subarray_bruteforce(values: Sequence[int]) -> Subarray:
    """Return a maximum-sum subarray of ``values`` by trying every run, O(n^2).

    The first run found with the largest sum wins, scanning by start then end.
    """
    if not values:
        raise ValueError("cannot find a subarray of an empty sequence")
    best = Subarray(0, 0, values[0])
    for start in range(len(values)):
        for offset, total in enumerate(accumulate(values[start:])):
            if total > best.sum:
                best = Subarray(start, start + offset, total)
    return best