"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from algokit.shortest_paths import Edge


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1`` with path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            following = self._parent[item]
            self._parent[item] = root
            item = following
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a spanning tree (or forest) in the order they were chosen."""

    edges: tuple[Edge, ...]

    @property
    def total_weight(self) -> float:
        return sum(edge.weight for edge in self.edges)


def kruskal(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, float]]
) -> SpanningTree:
    """Minimum spanning forest: edges taken by ascending weight, ties in input order."""
    edge_list = sorted((Edge(*edge) for edge in edges), key=lambda edge: edge.weight)
    for edge in edge_list:
        if not (0 <= edge.u < vertex_count and 0 <= edge.v < vertex_count):
            raise ValueError(f"edge {edge} refers to a missing vertex")
    components = DisjointSet(vertex_count)
    return SpanningTree(
        tuple(edge for edge in edge_list if components.union(edge.u, edge.v))
    )


def prim(graph: Sequence[Sequence[float]]) -> SpanningTree:
    """Minimum spanning tree grown from vertex 0 on an adjacency matrix (0 = no edge).

    The edges are listed by their endpoint vertex, 1 upwards.
    Raises ValueError if the graph is not connected.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square adjacency matrix")
    if size == 0:
        return SpanningTree(())

    keys: list[float] = [math.inf] * size
    parents: list[Optional[int]] = [None] * size
    in_tree = [False] * size
    keys[0] = 0

    for _ in range(size):
        u = min((i for i in range(size) if not in_tree[i]), key=keys.__getitem__)
        if keys[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < keys[v]:
                parents[v] = u
                keys[v] = weight

    return SpanningTree(
        tuple(Edge(parents[v], v, keys[v]) for v in range(1, size))  # type: ignore[arg-type]
    )