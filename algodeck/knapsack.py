"""The 0/1 knapsack by dynamic programming and the greedy fractional knapsack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["Item", "knapsack", "fractional_knapsack"]


@dataclass(frozen=True)
class Item:
    """An item with a value and a weight."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items, each taken whole or not at all, within capacity."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")

    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        # A knapsack of capacity zero always holds nothing.
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Largest total value within capacity when items may be taken in part.

    Items are taken greedily by decreasing value per unit of weight.
    """
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    pool = list(items)
    if any(item.weight <= 0 for item in pool):
        raise ValueError("item weights must be positive")

    remaining = capacity
    total = 0.0
    for item in sorted(pool, key=lambda it: it.ratio, reverse=True):
        if remaining == 0:
            break
        if item.weight <= remaining:
            remaining -= item.weight
            total += item.value
        else:
            total += item.value * (remaining / item.weight)
            remaining = 0
    return total