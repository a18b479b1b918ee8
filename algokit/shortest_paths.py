"""Single-source and all-pairs shortest paths on weighted directed graphs.

Unreachable vertices have a distance of ``math.inf``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import NamedTuple, Optional

INF = math.inf


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


class Edge(NamedTuple):
    """A directed weighted edge from ``u`` to ``v``."""

    u: int
    v: int
    weight: float


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessor links from a single source vertex."""

    source: int
    distances: tuple[float, ...]
    parents: tuple[Optional[int], ...]

    def path_to(self, target: int) -> Optional[list[int]]:
        """Return the vertices from the source to ``target``, or None if unreachable."""
        if not 0 <= target < len(self.distances):
            raise IndexError(f"vertex {target} out of range")
        if self.distances[target] == INF:
            return None
        path = [target]
        while path[-1] != self.source:
            parent = self.parents[path[-1]]
            assert parent is not None
            path.append(parent)
        path.reverse()
        return path


@dataclass(frozen=True)
class AllPairsShortestPaths:
    """Distance matrix and predecessor matrix for every pair of vertices."""

    distances: tuple[tuple[float, ...], ...]
    parents: tuple[tuple[Optional[int], ...], ...]

    def path(self, source: int, target: int) -> Optional[list[int]]:
        """Return the vertices from ``source`` to ``target``, or None if unreachable."""
        size = len(self.distances)
        if not (0 <= source < size and 0 <= target < size):
            raise IndexError("vertex out of range")
        if source == target:
            return [source]
        if self.distances[source][target] == INF:
            return None
        row = self.parents[source]
        path = [target]
        while path[-1] != source:
            parent = row[path[-1]]
            assert parent is not None
            path.append(parent)
        path.reverse()
        return path


def _square_size(graph: Sequence[Sequence[object]]) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square adjacency matrix")
    return size


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise ValueError(f"vertex {vertex} out of range for {size} vertices")


def bellman_ford(
    edges: Iterable[Edge | tuple[int, int, float]], vertex_count: int, source: int
) -> ShortestPaths:
    """Shortest paths from ``source`` over edges that may have negative weights.

    Raises NegativeCycleError if a negative cycle is reachable from the source.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    edge_list = [Edge(*edge) for edge in edges]
    _check_vertex(source, vertex_count)
    for edge in edge_list:
        _check_vertex(edge.u, vertex_count)
        _check_vertex(edge.v, vertex_count)

    distances: list[float] = [INF] * vertex_count
    parents: list[Optional[int]] = [None] * vertex_count
    distances[source] = 0

    for _ in range(vertex_count - 1):
        changed = False
        for u, v, weight in edge_list:
            if distances[u] != INF and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                parents[v] = u
                changed = True
        if not changed:
            break

    for u, v, weight in edge_list:
        if distances[u] != INF and distances[u] + weight < distances[v]:
            raise NegativeCycleError("graph contains a negative-weight cycle")

    return ShortestPaths(source, tuple(distances), tuple(parents))


def dijkstra(graph: Sequence[Sequence[float]], source: int) -> ShortestPaths:
    """Shortest paths from ``source`` on an adjacency matrix where 0 means no edge."""
    size = _square_size(graph)
    _check_vertex(source, size)

    distances: list[float] = [INF] * size
    parents: list[Optional[int]] = [None] * size
    settled = [False] * size
    distances[source] = 0

    for _ in range(size):
        u = min(
            (i for i in range(size) if not settled[i]),
            key=distances.__getitem__,
            default=None,
        )
        if u is None or distances[u] == INF:
            break
        settled[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not settled[v] and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                parents[v] = u

    return ShortestPaths(source, tuple(distances), tuple(parents))


def floyd_warshall(graph: Sequence[Sequence[Optional[float]]]) -> AllPairsShortestPaths:
    """All-pairs shortest paths; a missing edge is None or ``math.inf``."""
    size = _square_size(graph)
    distances: list[list[float]] = [
        [INF if weight is None else weight for weight in row] for row in graph
    ]
    parents: list[list[Optional[int]]] = [
        [None if u == v or distances[u][v] == INF else u for v in range(size)]
        for u in range(size)
    ]

    for k in range(size):
        via_row = distances[k]
        via_parents = parents[k]
        for u in range(size):
            to_k = distances[u][k]
            if to_k == INF:
                continue
            row = distances[u]
            for v in range(size):
                if via_row[v] != INF and to_k + via_row[v] < row[v]:
                    row[v] = to_k + via_row[v]
                    parents[u][v] = via_parents[v]

    return AllPairsShortestPaths(
        distances=tuple(tuple(row) for row in distances),
        parents=tuple(tuple(row) for row in parents),
    )