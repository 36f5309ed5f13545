"""Strongly connected components and bridges of graphs with 1-based vertices."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class _Color(Enum):
    WHITE = "white"
    GREY = "grey"
    BLACK = "black"


def _check_vertex(vertex: int, n: int) -> int:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} outside 1..{n}")
    return vertex - 1


def _finish_order(adjacency: list[list[int]]) -> list[int]:
    visited = [False] * len(adjacency)
    order: list[int] = []
    for start in range(len(adjacency)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            vertex, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                order.append(vertex)
    return order


def strongly_connected_components(
    n: int, edges: Iterable[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Return the component count and each vertex's 1-based component number.

    Components are numbered in topological order of the condensation: for an
    edge u -> v between different components, u's number is smaller.
    """
    forward: list[list[int]] = [[] for _ in range(n)]
    backward: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        u, v = _check_vertex(a, n), _check_vertex(b, n)
        forward[u].append(v)
        backward[v].append(u)

    labels = [-1] * n
    count = 0
    for start in reversed(_finish_order(forward)):
        if labels[start] != -1:
            continue
        labels[start] = count
        stack = [start]
        while stack:
            vertex = stack.pop()
            for nxt in backward[vertex]:
                if labels[nxt] == -1:
                    labels[nxt] = count
                    stack.append(nxt)
        count += 1
    return count, [label + 1 for label in labels]


def find_bridges(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the sorted 1-based ids of the edges that are bridges.

    Edge ids follow input order; self-loops are ignored and parallel edges
    are never bridges.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for edge_id, (a, b) in enumerate(edges, start=1):
        _check_vertex(a, n)
        _check_vertex(b, n)
        if a != b:
            adjacency[a].append((b, edge_id))
            adjacency[b].append((a, edge_id))

    color = [_Color.WHITE] * (n + 1)
    tin = [-1] * (n + 1)
    fup = [-1] * (n + 1)
    timer = 0
    bridges: list[int] = []

    for root in range(1, n + 1):
        if color[root] is not _Color.WHITE:
            continue
        color[root] = _Color.GREY
        tin[root] = fup[root] = timer
        timer += 1
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            vertex, parent_edge, neighbours = stack[-1]
            for target, edge_id in neighbours:
                if edge_id == parent_edge:
                    continue
                if color[target] is _Color.GREY:
                    fup[vertex] = min(fup[vertex], tin[target])
                elif color[target] is _Color.WHITE:
                    color[target] = _Color.GREY
                    tin[target] = fup[target] = timer
                    timer += 1
                    stack.append((target, edge_id, iter(adjacency[target])))
                    break
            else:
                stack.pop()
                color[vertex] = _Color.BLACK
                if stack:
                    parent = stack[-1][0]
                    fup[parent] = min(fup[parent], fup[vertex])
                    if fup[vertex] > tin[parent]:
                        bridges.append(parent_edge)
    return sorted(bridges)