"""0/1 knapsack by dynamic programming and the greedy fractional knapsack."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class KnapsackResult:
    """Outcome of a 0/1 knapsack.

    ``items`` holds 1-based item numbers in the order the table walk finds
    them (last item first); ``table`` is the full profit table, one row per
    item count and one column per capacity from 0 up.
    """

    max_profit: int
    items: tuple[int, ...]
    table: tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class FractionalResult:
    """Outcome of a fractional knapsack; ``fractions`` follows the input order."""

    total_value: float
    fractions: tuple[float, ...]


def knapsack_01(
    weights: Sequence[int], profits: Sequence[int], capacity: int
) -> KnapsackResult:
    """Choose whole items maximising total profit within ``capacity``."""
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    table = [[0] * (capacity + 1)]
    for weight, profit in zip(weights, profits):
        previous = table[-1]
        row = [0] * (capacity + 1)
        for j in range(1, capacity + 1):
            if weight <= j:
                row[j] = max(previous[j], previous[j - weight] + profit)
            else:
                row[j] = previous[j]
        table.append(row)

    chosen: list[int] = []
    i, j = len(weights), capacity
    while i > 0 and j > 0:
        if table[i][j] != table[i - 1][j]:
            chosen.append(i)
            j -= weights[i - 1]
        i -= 1

    return KnapsackResult(
        max_profit=table[-1][capacity],
        items=tuple(chosen),
        table=tuple(tuple(row) for row in table),
    )


def fractional_knapsack(
    values: Sequence[float], weights: Sequence[float], capacity: float
) -> FractionalResult:
    """Fill ``capacity`` greedily by value-to-weight ratio, splitting the last item."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")

    order = sorted(
        range(len(values)), key=lambda k: values[k] / weights[k], reverse=True
    )
    fractions = [0.0] * len(values)
    total = 0.0
    remaining = capacity
    for k in order:
        if remaining >= weights[k]:
            fractions[k] = 1.0
            total += values[k]
            remaining -= weights[k]
        else:
            fractions[k] = remaining / weights[k]
            total += values[k] * remaining / weights[k]
            break
    return FractionalResult(total_value=total, fractions=tuple(fractions))