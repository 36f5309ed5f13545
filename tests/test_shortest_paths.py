import itertools
import random

import pytest

from contestlib.shortest_paths import (
    DisjointSet,
    dijkstra,
    find_negative_cycle,
    minimum_spanning_tree_weight,
)

NO_EDGE = 100000


def _random_weighted(rng, n, m, low=0, high=20):
    return [(rng.randrange(n), rng.randrange(n), rng.randint(low, high)) for _ in range(m)]


def test_disjoint_set_union_and_find():
    dsu = DisjointSet(5)
    assert dsu.union(0, 1) is True
    assert dsu.union(1, 0) is False
    assert dsu.union(2, 3) is True
    assert dsu.find(0) == dsu.find(1)
    assert dsu.find(0) != dsu.find(2)
    assert dsu.union(1, 3) is True
    assert len({dsu.find(i) for i in range(4)}) == 1
    assert dsu.find(4) == 4


def test_dijkstra_unreachable_uses_sentinel():
    distances = dijkstra(3, [(0, 1, 4)], 0)
    assert distances == [0, 4, 2009000999]


def test_dijkstra_ignores_minus_one_edges():
    distances = dijkstra(2, [(0, 1, -1)], 0)
    assert distances == [0, 2009000999]


@pytest.mark.parametrize("seed", range(5))
def test_dijkstra_distances_are_tight(seed):
    rng = random.Random(seed)
    n = 10
    edges = _random_weighted(rng, n, 25)
    source = rng.randrange(n)
    dist = dijkstra(n, edges, source)
    assert dist[source] == 0
    for u, v, w in edges:
        if dist[u] != 2009000999:
            assert dist[v] <= dist[u] + w
            assert dist[u] <= dist[v] + w
    for v in range(n):
        if v != source and dist[v] != 2009000999:
            assert any(
                (b == v and dist[a] + w == dist[v]) or (a == v and dist[b] + w == dist[v])
                for a, b, w in edges
            )


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        dijkstra(2, [], 5)


def test_no_negative_cycle():
    matrix = [[0, 3, NO_EDGE], [NO_EDGE, 0, 2], [NO_EDGE, NO_EDGE, 0]]
    assert find_negative_cycle(matrix) is None


def _check_cycle(matrix, cycle):
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 2
    steps = list(zip(cycle, cycle[1:]))
    weights = [matrix[a - 1][b - 1] for a, b in steps]
    assert NO_EDGE not in weights
    assert sum(weights) < 0


def test_two_vertex_negative_cycle():
    matrix = [[NO_EDGE, 1], [-3, NO_EDGE]]
    cycle = find_negative_cycle(matrix)
    _check_cycle(matrix, cycle)


@pytest.mark.parametrize("seed", range(6))
def test_random_negative_cycles_are_valid(seed):
    rng = random.Random(seed)
    n = 5
    matrix = [
        [rng.choice([NO_EDGE, rng.randint(-5, 10)]) for _ in range(n)] for _ in range(n)
    ]
    cycle = find_negative_cycle(matrix)
    if cycle is None:
        for length in range(1, n + 1):
            for path in itertools.permutations(range(n), length):
                loop = list(path) + [path[0]]
                weights = [matrix[a][b] for a, b in zip(loop, loop[1:])]
                assert NO_EDGE in weights or sum(weights) >= 0
    else:
        _check_cycle(matrix, cycle)


def test_negative_cycle_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        find_negative_cycle([[0, 1], [1]])


def test_mst_of_tree_is_total_weight():
    edges = [(1, 2, 5), (2, 3, 7), (2, 4, 1)]
    assert minimum_spanning_tree_weight(4, edges) == sum(w for _, _, w in edges)


@pytest.mark.parametrize("seed", range(4))
def test_mst_not_heavier_than_any_spanning_tree(seed):
    rng = random.Random(seed)
    n = 5
    edges = [(a, b, rng.randint(1, 30)) for a, b in itertools.combinations(range(1, n + 1), 2)]
    best = minimum_spanning_tree_weight(n, edges)
    for subset in itertools.combinations(edges, n - 1):
        dsu = DisjointSet(n)
        if all(dsu.union(a - 1, b - 1) for a, b, _ in subset):
            assert best <= sum(w for _, _, w in subset)


def test_mst_ignores_heavier_parallel_edge():
    edges = [(1, 2, 9), (1, 2, 2)]
    assert minimum_spanning_tree_weight(2, edges) == 2