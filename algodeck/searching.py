"""Searches over sequences of integers.

Every search returns the index of the target, or ``None`` when the target
is absent. All but :func:`linear_search` expect ascending order.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = [
    "binary_search",
    "exponential_search",
    "fibonacci_search",
    "jump_search",
    "linear_search",
]


def _binary_search_range(
    values: Sequence[int], left: int, right: int, target: int
) -> int | None:
    while left <= right:
        middle = left + (right - left) // 2
        found = values[middle]
        if found == target:
            return middle
        if found > target:
            right = middle - 1
        else:
            left = middle + 1
    return None


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Find target in sorted values by halving the search interval."""
    return _binary_search_range(values, 0, len(values) - 1, target)


def exponential_search(values: Sequence[int], target: int) -> int | None:
    """Find target by doubling a bound, then binary searching within it."""
    n = len(values)
    if n == 0:
        return None
    if values[0] == target:
        return 0
    bound = 1
    while bound < n and values[bound] <= target:
        bound *= 2
    return _binary_search_range(values, bound // 2, min(bound, n - 1), target)


def _fibonacci_numbers_reaching(n: int) -> list[int]:
    """Fibonacci numbers F0, F1, ... up to the first one that is at least n."""
    fibs = [0, 1]
    while fibs[-1] < n:
        fibs.append(fibs[-1] + fibs[-2])
    return fibs


def fibonacci_search(values: Sequence[int], target: int) -> int | None:
    """Find target by Fibonaccian search.

    The array is treated as if padded up to the next Fibonacci length with
    elements larger than the target.
    """
    n = len(values)
    fibs = _fibonacci_numbers_reaching(n)
    k = len(fibs) - 1
    offset = 0
    while k > 0:
        k -= 1
        index = offset + fibs[k]
        if index >= n or target < values[index]:
            continue
        if target > values[index]:
            offset = index
            k -= 1
        else:
            return index
    return None


def jump_search(values: Sequence[int], target: int) -> int | None:
    """Find target by jumping ahead in blocks of sqrt(n), then scanning one block."""
    n = len(values)
    if n == 0:
        return None
    jump = math.isqrt(n)
    step = jump
    prev = 0
    while values[min(step, n) - 1] < target:
        prev = step
        step += jump
        if prev >= n:
            return None
    while values[prev] < target:
        prev += 1
        if prev == min(step, n):
            return None
    return prev if values[prev] == target else None


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Index of the first element equal to target."""
    return next((i for i, value in enumerate(values) if value == target), None)