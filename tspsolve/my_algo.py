"""Tour construction by repeated nearest-neighbour starts refined with 2-opt."""

from __future__ import annotations

import random
import time
from collections.abc import Iterator

from tspsolve.graph import Graph

DELTA = 5
"""Largest distance between the two edges a 2-opt move may exchange."""

RUNS_SMALL = 50
RUNS_MEDIUM = 30
SMALL_LIMIT = 5000
MEDIUM_LIMIT = 20000
TIME_BOUND_S = 60.0
"""Wall-clock budget used for graphs larger than ``MEDIUM_LIMIT`` cities."""


def _attempts(n: int) -> Iterator[None]:
    """Yield once per restart: a fixed count for small graphs, timed otherwise."""
    if n <= SMALL_LIMIT:
        for _ in range(RUNS_SMALL):
            yield None
        return
    if n <= MEDIUM_LIMIT:
        for _ in range(RUNS_MEDIUM):
            yield None
        return
    deadline = time.monotonic() + TIME_BOUND_S
    yield None
    while time.monotonic() < deadline:
        yield None


def _greedy_nn(graph: Graph, start: int) -> list[int]:
    """Closed nearest-neighbour tour from ``start``; ties go to the lowest city."""
    unvisited = set(range(graph.n))
    unvisited.discard(start)
    tour = [start]
    while unvisited:
        row = graph.dist[tour[-1]]
        nearest = min(unvisited, key=lambda v: (row[v], v))
        unvisited.remove(nearest)
        tour.append(nearest)
    tour.append(start)
    return tour


def _first_improvement(graph: Graph, tour: list[int], max_delta: int) -> bool:
    """Apply the first improving bounded 2-opt move; report whether one was found."""
    n = graph.n
    w = graph.weight
    for i in range(1, n - 1):
        end = min(i + max_delta, n - 1)
        for j in range(i + 1, end + 1):
            a, b, c, d = tour[i - 1], tour[i], tour[j], tour[j + 1]
            if w(a, c) + w(b, d) - w(a, b) - w(c, d) < 0:
                tour[i : j + 1] = tour[i : j + 1][::-1]
                return True
    return False


def _two_opt(graph: Graph, tour: list[int], max_delta: int = DELTA) -> None:
    while _first_improvement(graph, tour, max_delta):
        pass


def _tour_cost(graph: Graph, tour: list[int]) -> int:
    return sum(graph.weight(a, b) for a, b in zip(tour, tour[1:]))


def my_algo_tour(graph: Graph, rng: random.Random | None = None) -> tuple[int, list[int]]:
    """Return the best ``(cost, tour)`` over several randomly started searches.

    Each attempt builds a nearest-neighbour tour from a random city and
    improves it with 2-opt moves spanning at most ``DELTA`` positions.
    """
    n = graph.n
    if n == 0:
        raise ValueError("graph has no cities")
    if rng is None:
        rng = random.Random()

    best: tuple[int, list[int]] | None = None
    for _ in _attempts(n):
        tour = _greedy_nn(graph, rng.randrange(n))
        _two_opt(graph, tour)
        cost = _tour_cost(graph, tour)
        if best is None or cost < best[0]:
            best = (cost, tour)
    assert best is not None
    return best