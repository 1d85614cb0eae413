"""Array algorithms: majority vote and maximum subarray sum."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["majority_element", "max_subarray_sum"]


def _candidate(values: Sequence[int]) -> int:
    candidate = values[0]
    count = 1
    for value in values[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    return candidate


def majority_element(values: Sequence[int]) -> int | None:
    """The element occurring more than len(values) // 2 times, or None.

    Uses Moore's voting algorithm followed by a verification pass.
    """
    if not values:
        return None
    candidate = _candidate(values)
    occurrences = sum(1 for value in values if value == candidate)
    return candidate if occurrences > len(values) // 2 else None


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by Kadane's algorithm.

    An empty sequence gives 0.
    """
    if not values:
        return 0
    best = current = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best