"""Dijkstra, negative-cycle search with Bellman-Ford, and Kruskal's spanning tree."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

UNREACHABLE = 2_009_000_999
_IGNORED_WEIGHT = -1
_NO_EDGE = 100_000
_INFINITY = 100_000_000


class DisjointSet:
    """Union by rank over the items 0..size-1."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [1] * size

    def find(self, item: int) -> int:
        while item != self._parent[item]:
            item = self._parent[item]
        return item

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; False if they were already one."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            a, b = b, a
        self._parent[b] = a
        if self._rank[a] == self._rank[b]:
            self._rank[a] += 1
        return True


def dijkstra(n: int, edges: Iterable[tuple[int, int, int]], source: int) -> list[int]:
    """Shortest distances from ``source`` over undirected 0-based edges.

    Edges of weight -1 are ignored; unreachable vertices get 2009000999.
    """
    if not 0 <= source < n:
        raise ValueError(f"source {source} outside 0..{n - 1}")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    distance = [UNREACHABLE] * n
    distance[source] = 0
    heap = [(0, source)]
    while heap:
        dist, current = heapq.heappop(heap)
        if dist > distance[current]:
            continue
        for neighbour, weight in adjacency[current]:
            if weight == _IGNORED_WEIGHT:
                continue
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance


def find_negative_cycle(matrix: Sequence[Sequence[int]]) -> list[int] | None:
    """Find a negative cycle in a weight matrix where 100000 means "no edge".

    Returns its 1-based vertices in travel order, the first repeated at the
    end, or None when there is no negative cycle.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("weight matrix must be square")
    if size == 0:
        return None
    edges = [
        (u, v, weight)
        for u, row in enumerate(matrix)
        for v, weight in enumerate(row)
        if weight != _NO_EDGE
    ]
    dist = [_INFINITY] * size
    parent = [-1] * size
    dist[0] = 0
    last = -1
    for _ in range(size):
        last = -1
        for u, v, weight in edges:
            if dist[v] > dist[u] + weight:
                dist[v] = max(-_INFINITY, dist[u] + weight)
                parent[v] = u
                last = v
    if last == -1:
        return None

    start = last
    for _ in range(size):
        start = parent[start]
    cycle = [start]
    current = parent[start]
    while True:
        cycle.append(current)
        if current == start:
            break
        current = parent[current]
    cycle.reverse()
    return [vertex + 1 for vertex in cycle]


def minimum_spanning_tree_weight(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning forest over 1-based weighted edges."""
    ordered = sorted(edges, key=lambda edge: edge[2])
    components = DisjointSet(n)
    total = 0
    for u, v, weight in ordered:
        if components.union(u - 1, v - 1):
            total += weight
    return total