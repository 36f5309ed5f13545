"""Searches over sequences: crossing point, probe counting, longest non-increasing run."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence

_NO_MAXIMUM = 10_000_000


def crossing_index(a: Sequence[int], b: Sequence[int]) -> int:
    """Binary-search the 1-based index minimising max(a[i], b[i]).

    ``a`` is expected to grow and ``b`` to shrink; 0 is returned when no
    element is below 10**7.
    """
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    best = _NO_MAXIMUM
    answer = 0
    left, right = 0, len(a) - 1
    while left <= right:
        mid = (left + right) // 2
        peak = max(a[mid], b[mid])
        if peak < best:
            best = peak
            answer = mid + 1
        if a[mid] < b[mid]:
            left = mid + 1
        else:
            right = mid - 1
    return answer


def egg_drop_attempts(n: int, k: int) -> int:
    """Least number of probes that locate a threshold among ``n`` positions.

    At most ``k`` probes may fail. Raises ValueError when no number of probes
    suffices.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if k < 0:
        raise ValueError("k must be non-negative")
    span = n - 1
    if span == 0:
        return 0
    if k == 0:
        raise ValueError("the threshold cannot be found without failing probes")
    if k >= span:
        return span.bit_length()
    covered = [0] * (k + 1)
    attempts = 0
    while covered[k] < span:
        attempts += 1
        covered = [0] + [cur + prev + 1 for prev, cur in zip(covered, covered[1:])]
    return attempts


def longest_nonincreasing_subsequence(values: Iterable[int]) -> list[int]:
    """Return 1-based indices of a longest non-increasing subsequence."""
    data = list(values)
    tails: list[int] = []
    keys: list[int] = []
    previous: list[int] = []
    for index, value in enumerate(data):
        position = bisect_right(keys, -value)
        previous.append(tails[position - 1] if position else -1)
        if position == len(tails):
            tails.append(index)
            keys.append(-value)
        else:
            tails[position] = index
            keys[position] = -value
    result: list[int] = []
    current = tails[-1] if tails else -1
    while current != -1:
        result.append(current + 1)
        current = previous[current]
    result.reverse()
    return result