import random

import pytest

from tspsolve.graph import INF, Graph
from tspsolve.mst_approx import mst_approx_tour


def _graph(matrix):
    graph = Graph(len(matrix))
    for u, row in enumerate(matrix):
        for v, w in enumerate(row):
            graph.set_edge(u, v, w)
    return graph


SQUARE = [
    [0, 10, 14, 10],
    [10, 0, 10, 14],
    [14, 10, 0, 10],
    [10, 14, 10, 0],
]


def _random_symmetric(n, seed):
    rng = random.Random(seed)
    matrix = [[0] * n for _ in range(n)]
    for u in range(n):
        for v in range(u + 1, n):
            matrix[u][v] = matrix[v][u] = rng.randint(1, 100)
    return matrix


def _tour_cost(graph, tour):
    return sum(graph.weight(a, b) for a, b in zip(tour, tour[1:]))


def test_square_tour_pinned():
    cost, tour = mst_approx_tour(_graph(SQUARE))
    assert tour == [0, 3, 1, 2, 0]
    assert cost == 48


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_tour_visits_every_city_once(seed):
    graph = _graph(_random_symmetric(9, seed))
    _, tour = mst_approx_tour(graph)
    assert tour[0] == 0 and tour[-1] == 0
    assert sorted(tour[:-1]) == list(range(9))


@pytest.mark.parametrize("seed", [4, 5])
def test_cost_matches_tour(seed):
    graph = _graph(_random_symmetric(8, seed))
    cost, tour = mst_approx_tour(graph)
    assert cost == _tour_cost(graph, tour)


def test_single_city():
    assert mst_approx_tour(Graph(1)) == (0, [0, 0])


def test_empty_graph_rejected():
    with pytest.raises(ValueError):
        mst_approx_tour(Graph(0))


def test_disconnected_graph_rejected():
    matrix = [[0 if u == v else INF for v in range(3)] for u in range(3)]
    with pytest.raises(ValueError, match="not connected"):
        mst_approx_tour(_graph(matrix))