"""Backtracking searches: Hamiltonian cycles, graph colourings, n-queens, subset sums."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _square_size(graph: Sequence[Sequence[int]]) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square adjacency matrix")
    return size


def hamiltonian_cycles(graph: Sequence[Sequence[int]]) -> Iterator[tuple[int, ...]]:
    """Yield every Hamiltonian cycle starting and ending at vertex 0.

    Each cycle lists the vertices in visiting order with vertex 0 repeated at
    the end; cycles come in lexicographic order.
    """
    size = _square_size(graph)
    return _hamiltonian(graph, size)


def _hamiltonian(graph: Sequence[Sequence[int]], size: int) -> Iterator[tuple[int, ...]]:
    if size == 0:
        return
    path = [0]
    visited = {0}

    def extend() -> Iterator[tuple[int, ...]]:
        last = path[-1]
        for vertex in range(1, size):
            if vertex in visited or not graph[last][vertex]:
                continue
            if len(path) == size - 1:
                if graph[vertex][0]:
                    yield (*path, vertex, 0)
            else:
                path.append(vertex)
                visited.add(vertex)
                yield from extend()
                path.pop()
                visited.discard(vertex)

    yield from extend()


def graph_colorings(
    graph: Sequence[Sequence[int]], colors: int
) -> Iterator[tuple[int, ...]]:
    """Yield every assignment of colours ``1 .. colors`` in which no edge joins
    two vertices of the same colour, in lexicographic order."""
    size = _square_size(graph)
    if colors < 0:
        raise ValueError("colors must not be negative")
    return _colorings(graph, size, colors)


def _colorings(
    graph: Sequence[Sequence[int]], size: int, colors: int
) -> Iterator[tuple[int, ...]]:
    assignment: list[int] = []

    def extend() -> Iterator[tuple[int, ...]]:
        vertex = len(assignment)
        if vertex == size:
            yield tuple(assignment)
            return
        if graph[vertex][vertex]:
            return
        for color in range(1, colors + 1):
            if any(
                graph[other][vertex] and used == color
                for other, used in enumerate(assignment)
            ):
                continue
            assignment.append(color)
            yield from extend()
            assignment.pop()

    yield from extend()


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    A placement gives, for each row, the 0-based column of its queen.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    return _queens(n)


def _queens(n: int) -> Iterator[tuple[int, ...]]:
    if n == 0:
        return
    columns: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            placed != col and abs(placed - col) != row - r
            for r, placed in enumerate(columns)
        )

    def extend() -> Iterator[tuple[int, ...]]:
        row = len(columns)
        for col in range(n):
            if not safe(row, col):
                continue
            columns.append(col)
            if row == n - 1:
                yield tuple(columns)
            else:
                yield from extend()
            columns.pop()

    yield from extend()


def subsets_with_sum(
    weights: Sequence[int], target: int
) -> Iterator[tuple[int, ...]]:
    """Yield every subset of ``weights`` summing to ``target``.

    Weights must be positive. The weights are sorted ascending first; each
    subset is a tuple in that order, and equal weights count as distinct items.
    """
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    ordered = sorted(weights)
    if not ordered or target <= 0 or sum(ordered) < target:
        return iter(())
    return _subsets(ordered, target)


def _subsets(ordered: list[int], target: int) -> Iterator[tuple[int, ...]]:
    w = [*ordered, 0]
    chosen: list[int] = []

    def search(total: int, k: int, remaining: int) -> Iterator[tuple[int, ...]]:
        chosen.append(w[k])
        if total + w[k] == target:
            yield tuple(chosen)
        elif total + w[k] + w[k + 1] <= target:
            yield from search(total + w[k], k + 1, remaining - w[k])
        chosen.pop()
        if total + w[k + 1] <= target and total + remaining - w[k] >= target:
            yield from search(total, k + 1, remaining - w[k])

    yield from search(0, 0, sum(ordered))