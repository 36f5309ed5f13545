"""Separate-chaining hash set and counter, and the problems built on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_BUCKETS = 1_046_527


class ChainedHashSet:
    """Set of integers stored in chained buckets."""

    def __init__(self) -> None:
        self._buckets: dict[int, list[int]] = {}

    def add(self, value: int) -> None:
        bucket = self._buckets.setdefault(value % _BUCKETS, [])
        if value not in bucket:
            bucket.append(value)

    def discard(self, value: int) -> None:
        bucket = self._buckets.get(value % _BUCKETS)
        if not bucket or value not in bucket:
            return
        position = bucket.index(value)
        bucket[position] = bucket[-1]
        bucket.pop()

    def __contains__(self, value: int) -> bool:
        return value in self._buckets.get(value % _BUCKETS, ())


@dataclass
class _Entry:
    value: int
    count: int


class ChainedCounter:
    """Multiset of integers stored in chained buckets, remembering key order."""

    def __init__(self) -> None:
        self._buckets: dict[int, list[_Entry]] = {}
        self._order: list[int] = []

    def _find(self, value: int) -> _Entry | None:
        for entry in self._buckets.get(value % _BUCKETS, ()):
            if entry.value == value:
                return entry
        return None

    def add(self, value: int) -> None:
        entry = self._find(value)
        if entry is None:
            self._buckets.setdefault(value % _BUCKETS, []).append(_Entry(value, 1))
            self._order.append(value)
        else:
            entry.count += 1

    def count(self, value: int) -> int:
        entry = self._find(value)
        return entry.count if entry else 0

    def take(self, value: int) -> bool:
        """Remove one occurrence of ``value``; report whether there was one."""
        entry = self._find(value)
        if entry is None or entry.count <= 0:
            return False
        entry.count -= 1
        return True

    def keys(self) -> list[int]:
        """Distinct values in the order they were first added."""
        return list(self._order)

    def clear(self) -> None:
        self._buckets.clear()
        self._order.clear()


def run_set_commands(commands: Iterable[str]) -> list[str]:
    """Execute "+ x", "- x" and "? x" commands, returning YES/NO replies."""
    members = ChainedHashSet()
    replies: list[str] = []
    for command in commands:
        parts = command.split()
        if not parts:
            continue
        operation, value = parts[0], int(parts[1])
        if operation == "+":
            members.add(value)
        elif operation == "-":
            members.discard(value)
        else:
            replies.append("YES" if value in members else "NO")
    return replies


def multiset_intersection(available: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Queries that can each be matched against a still unused available value."""
    stock = ChainedCounter()
    for value in available:
        stock.add(value)
    return [query for query in queries if stock.take(query)]


def _squared_distance(p: tuple[int, int], q: tuple[int, int]) -> int:
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    return dx * dx + dy * dy


def count_equidistant_pairs(points: Iterable[tuple[int, int]]) -> int:
    """Count triples (apex, {p, q}) with the apex equally far from p and q."""
    pts = list(points)
    total = 0
    for i, apex in enumerate(pts):
        seen = ChainedCounter()
        for j, other in enumerate(pts):
            if i == j:
                continue
            distance = _squared_distance(apex, other)
            total += seen.count(distance)
            seen.add(distance)
    return total


def count_isosceles(points: Iterable[tuple[int, int]], kind: int) -> int:
    """Count equidistant apex pairs; problem kind 2 always has answer 0."""
    pts = list(points)
    if kind == 2:
        return 0
    total = 0
    distances = ChainedCounter()
    for i, apex in enumerate(pts):
        distances.clear()
        for j, other in enumerate(pts):
            if i != j:
                distances.add(_squared_distance(apex, other))
        for key in distances.keys():
            occurrences = distances.count(key)
            total += occurrences * (occurrences - 1) // 2
    return total