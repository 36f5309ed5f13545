"""Sorting and selection routines: merge sort, interval union, quickselect, radix sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

_SEQ_PREV_FACTOR = 123
_SEQ_PREV2_FACTOR = 45
_SEQ_MODULUS = 10_000_000 + 4321
_RADIX_BITS = 64
_GROUP_SIZE = 5


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` in ascending order (stable)."""
    data = list(items)
    if len(data) <= 1:
        return data
    middle = len(data) // 2
    return _merge(merge_sort(data[:middle]), merge_sort(data[middle:]))


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Join overlapping or touching closed intervals, returned in ascending order."""
    ordered = merge_sort(tuple(interval) for interval in intervals)
    if not ordered:
        return []
    merged: list[tuple[int, int]] = []
    current_start, current_end = ordered[0]
    for start, end in ordered[1:]:
        if current_end >= start:
            current_end = max(current_end, end)
        else:
            merged.append((current_start, current_end))
            current_start, current_end = start, end
    merged.append((current_start, current_end))
    return merged


def _middle(chunk: Sequence[Any]) -> Any:
    return chunk[(len(chunk) - 1) // 2]


def median_of_medians(values: Iterable[Any]) -> Any:
    """Pick a pivot by repeatedly taking the middle element of groups of five."""
    data = list(values)
    if not data:
        raise ValueError("median_of_medians() of an empty sequence")
    while len(data) > _GROUP_SIZE:
        data = [
            _middle(data[start:start + _GROUP_SIZE])
            for start in range(0, len(data), _GROUP_SIZE)
        ]
    return _middle(data)


def quickselect(values: Iterable[Any], k: int) -> Any:
    """Return the element that would sit at 0-based position ``k`` once sorted."""
    data = list(values)
    if not 0 <= k < len(data):
        raise IndexError(f"position {k} out of range for {len(data)} values")
    while True:
        pivot = median_of_medians(data)
        less = [v for v in data if v < pivot]
        if k < len(less):
            data = less
            continue
        equal = sum(1 for v in data if v == pivot)
        if k < len(less) + equal:
            return pivot
        k -= len(less) + equal
        data = [v for v in data if v > pivot]


def generate_sequence(n: int, first: int, second: int) -> list[int]:
    """Build ``n`` terms of a[i] = (123*a[i-1] + 45*a[i-2]) mod 10004321."""
    if n < 0:
        raise ValueError("sequence length must be non-negative")
    sequence = [first, second][:n]
    while len(sequence) < n:
        sequence.append(
            (sequence[-1] * _SEQ_PREV_FACTOR + sequence[-2] * _SEQ_PREV2_FACTOR)
            % _SEQ_MODULUS
        )
    return sequence


def kth_statistic(n: int, k: int, first: int, second: int) -> int:
    """Return the k-th smallest (1-based) term of the generated sequence."""
    return quickselect(generate_sequence(n, first, second), k - 1)


def radix_sort(numbers: Iterable[int]) -> list[int]:
    """Sort unsigned 64-bit integers with a stable binary LSD radix sort."""
    data = list(numbers)
    limit = 1 << _RADIX_BITS
    for value in data:
        if not 0 <= value < limit:
            raise ValueError(f"{value} is not an unsigned 64-bit integer")
    for bit in range(_RADIX_BITS):
        zeros = [v for v in data if not (v >> bit) & 1]
        ones = [v for v in data if (v >> bit) & 1]
        data = zeros + ones
    return data