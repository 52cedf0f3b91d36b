"""Dense weighted directed graph with planar coordinates for each city."""

from __future__ import annotations

INF = 2**31 - 1
"""Weight reported for edges that do not exist or lie outside the graph."""


class Graph:
    """A complete graph on ``n`` cities stored as a distance matrix."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"number of cities must not be negative, got {n}")
        self.n = n
        self.dist: list[list[int]] = [[0] * n for _ in range(n)]
        self.coords: list[tuple[float, float]] = [(0.0, 0.0)] * n

    def _contains(self, v: int) -> bool:
        return 0 <= v < self.n

    def set_edge(self, u: int, v: int, w: int) -> None:
        """Set the weight of edge ``u -> v``; out-of-range cities are ignored."""
        if self._contains(u) and self._contains(v):
            self.dist[u][v] = w

    def weight(self, u: int, v: int) -> int:
        """Return the weight of edge ``u -> v``, or ``INF`` if out of range."""
        if not (self._contains(u) and self._contains(v)):
            return INF
        return self.dist[u][v]

    def xy(self, v: int) -> tuple[float, float]:
        """Return the coordinates of city ``v``, or the origin if out of range."""
        if not self._contains(v):
            return (0.0, 0.0)
        return self.coords[v]