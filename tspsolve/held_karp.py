"""Exact tour by Held-Karp dynamic programming over city subsets."""

from __future__ import annotations

import time

from tspsolve.graph import INF, Graph

MAX_CITIES = 25
_UNREACHED = INF // 2


def held_karp_tour(graph: Graph, time_limit_s: float = 0.0) -> tuple[int, list[int]]:
    """Return the optimal ``(cost, tour)`` starting and ending at city 0.

    A positive ``time_limit_s`` bounds the processor time spent; exceeding it
    raises ``TimeoutError``.
    """
    n = graph.n
    if n > MAX_CITIES:
        raise ValueError(f"held-karp supports at most {MAX_CITIES} cities, got {n}")
    if n < 2:
        raise ValueError("held-karp needs at least two cities")

    masks = 1 << n
    dp = [_UNREACHED] * (masks * n)
    parent = [-1] * (masks * n)
    dp[1 * n + 0] = 0
    weights = [[graph.weight(u, v) for v in range(n)] for u in range(n)]

    start = time.process_time()
    for mask in range(1, masks, 2):
        if time_limit_s > 0 and time.process_time() - start > time_limit_s:
            raise TimeoutError(f"held-karp exceeded {time_limit_s} seconds")
        base = mask * n
        for u in range(n):
            if not mask >> u & 1:
                continue
            cost = dp[base + u]
            if cost >= _UNREACHED:
                continue
            for v, w in enumerate(weights[u]):
                if mask >> v & 1 or w == INF:
                    continue
                idx = (mask | 1 << v) * n + v
                new_cost = cost + w
                if new_cost < dp[idx]:
                    dp[idx] = new_cost
                    parent[idx] = u

    full = masks - 1
    best_cost, best_end = _UNREACHED, -1
    for u in range(1, n):
        cost = dp[full * n + u]
        back = weights[u][0]
        if cost < _UNREACHED and back < INF and cost + back < best_cost:
            best_cost, best_end = cost + back, u
    if best_end < 0:
        raise ValueError("graph has no tour through every city")

    path = [0] * (n + 1)
    path[n - 1] = best_end
    mask = full
    for idx in range(n - 2, -1, -1):
        u = path[idx + 1]
        path[idx] = parent[mask * n + u]
        mask ^= 1 << u
    return best_cost, path