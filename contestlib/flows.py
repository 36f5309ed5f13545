"""Bipartite matching, minimum s-t cut and minimum-cost maximum flow."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

_PATH_FLOW_CAP = 10_000_001
_UNREACHED = 10**11

_Step = tuple[int, int]


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} outside 1..{n}")


def _walk_back(parent: Sequence[_Step | None], source: int, sink: int) -> Iterator[_Step]:
    """Yield (vertex, edge position) pairs along the parent path from sink to source."""
    vertex = sink
    while vertex != source:
        step = parent[vertex]
        assert step is not None
        yield step
        vertex = step[0]


def max_bipartite_matching(
    left_count: int, right_count: int, adjacency: Iterable[Iterable[int]]
) -> list[tuple[int, int]]:
    """Maximum matching found with Kuhn's augmenting paths.

    ``adjacency`` holds, for each left vertex in order, the 1-based right
    vertices it may be matched with. The result lists 1-based
    (left, right) pairs ordered by the right vertex.
    """
    rows = [list(row) for row in adjacency]
    if len(rows) != left_count:
        raise ValueError(f"expected {left_count} adjacency rows, got {len(rows)}")
    for row in rows:
        for target in row:
            _check_vertex(target, right_count)
    graph = [[target - 1 for target in row] for row in rows]
    match = [-1] * right_count

    def augment(vertex: int, used: list[bool]) -> bool:
        if used[vertex]:
            return False
        used[vertex] = True
        for target in graph[vertex]:
            if match[target] == -1 or augment(match[target], used):
                match[target] = vertex
                return True
        return False

    for vertex in range(left_count):
        augment(vertex, [False] * left_count)
    return [(left + 1, right + 1) for right, left in enumerate(match) if left != -1]


@dataclass
class _FlowEdge:
    to: int
    capacity: int
    flow: int
    reverse: int
    index: int


def _residual_bfs(
    graph: list[list[_FlowEdge]], source: int
) -> tuple[list[bool], list[_Step | None]]:
    visited = [False] * len(graph)
    parent: list[_Step | None] = [None] * len(graph)
    visited[source] = True
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for position, edge in enumerate(graph[vertex]):
            if not visited[edge.to] and edge.capacity - edge.flow > 0:
                visited[edge.to] = True
                parent[edge.to] = (vertex, position)
                queue.append(edge.to)
    return visited, parent


def min_cut(n: int, edges: Iterable[tuple[int, int, int]]) -> tuple[int, list[int]]:
    """Minimum cut between vertex 1 and vertex ``n`` of an undirected graph.

    Edges are (u, v, capacity) with 1-based vertices and get ids 1, 2, ...
    in input order. Returns the cut capacity and the sorted ids of the cut
    edges.
    """
    if n < 2:
        raise ValueError("a cut needs at least two vertices")
    graph: list[list[_FlowEdge]] = [[] for _ in range(n + 1)]
    for index, (u, v, capacity) in enumerate(edges, start=1):
        _check_vertex(u, n)
        _check_vertex(v, n)
        graph[u].append(_FlowEdge(v, capacity, 0, len(graph[v]), index))
        graph[v].append(_FlowEdge(u, capacity, 0, len(graph[u]) - 1, index))

    source, sink = 1, n
    total = 0
    while True:
        visited, parent = _residual_bfs(graph, source)
        if not visited[sink]:
            break
        path = list(_walk_back(parent, source, sink))
        push = min(
            [_PATH_FLOW_CAP]
            + [graph[u][p].capacity - graph[u][p].flow for u, p in path]
        )
        for u, p in path:
            edge = graph[u][p]
            edge.flow += push
            graph[edge.to][edge.reverse].flow -= push
        total += push

    visited, _ = _residual_bfs(graph, source)
    cut = sorted(
        edge.index
        for vertex in range(1, n + 1)
        if visited[vertex]
        for edge in graph[vertex]
        if not visited[edge.to]
    )
    return total, cut


@dataclass
class _CostEdge:
    to: int
    reverse: int
    capacity: int
    cost: int


def _reduced_dijkstra(
    graph: list[list[_CostEdge]], potential: list[int], source: int
) -> tuple[list[int], list[_Step | None]]:
    dist = [_UNREACHED] * len(graph)
    parent: list[_Step | None] = [None] * len(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, vertex = heapq.heappop(heap)
        if d > dist[vertex]:
            continue
        for position, edge in enumerate(graph[vertex]):
            if edge.capacity <= 0:
                continue
            reduced = edge.cost + potential[vertex] - potential[edge.to]
            candidate = dist[vertex] + reduced
            if candidate < dist[edge.to]:
                dist[edge.to] = candidate
                parent[edge.to] = (vertex, position)
                heapq.heappush(heap, (candidate, edge.to))
    return dist, parent


def min_cost_max_flow(
    n: int, edges: Iterable[tuple[int, int, int, int]], source: int, sink: int
) -> int:
    """Cost of a maximum flow of least cost from ``source`` to ``sink``.

    Edges are directed (u, v, capacity, cost) with 1-based vertices and
    non-negative costs.
    """
    _check_vertex(source, n)
    _check_vertex(sink, n)
    if source == sink:
        raise ValueError("source and sink must differ")
    graph: list[list[_CostEdge]] = [[] for _ in range(n + 1)]
    for u, v, capacity, cost in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        graph[u].append(_CostEdge(v, len(graph[v]), capacity, cost))
        graph[v].append(_CostEdge(u, len(graph[u]) - 1, 0, -cost))

    potential = [0] * (n + 1)
    total = 0
    while True:
        dist, parent = _reduced_dijkstra(graph, potential, source)
        if dist[sink] == _UNREACHED:
            break
        for vertex in range(1, n + 1):
            if dist[vertex] < _UNREACHED:
                potential[vertex] += dist[vertex]
        path = list(_walk_back(parent, source, sink))
        push = min(graph[u][p].capacity for u, p in path)
        total += push * potential[sink]
        for u, p in path:
            edge = graph[u][p]
            edge.capacity -= push
            graph[edge.to][edge.reverse].capacity += push
    return total