"""Tour construction from a preorder walk of a minimum spanning tree."""

from __future__ import annotations

from tspsolve.graph import INF, Graph


def _prim_parents(graph: Graph) -> list[int]:
    n = graph.n
    key = [INF] * n
    in_tree = [False] * n
    parent = [-1] * n
    key[0] = 0

    for _ in range(n - 1):
        u, best = -1, INF
        for v in range(n):
            if not in_tree[v] and key[v] < best:
                u, best = v, key[v]
        if u < 0:
            break
        in_tree[u] = True
        for v in range(n):
            w = graph.weight(u, v)
            if not in_tree[v] and w < key[v]:
                key[v] = w
                parent[v] = u
    return parent


def _preorder(adjacency: list[list[int]]) -> list[int]:
    # Neighbours are visited most recently added first.
    order = [0]
    visited = {0}
    stack = [iter(reversed(adjacency[0]))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(reversed(adjacency[neighbour])))
                break
        else:
            stack.pop()
    return order


def mst_approx_tour(graph: Graph) -> tuple[int, list[int]]:
    """Return ``(cost, tour)`` for the MST-preorder tour from city 0 back to 0."""
    n = graph.n
    if n == 0:
        raise ValueError("graph has no cities")

    parents = _prim_parents(graph)
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for v in range(1, n):
        u = parents[v]
        if u >= 0:
            adjacency[u].append(v)
            adjacency[v].append(u)

    order = _preorder(adjacency)
    if len(order) < n:
        raise ValueError("graph is not connected")

    tour = order + [0]
    cost = sum(graph.weight(a, b) for a, b in zip(tour, tour[1:]))
    return cost, tour