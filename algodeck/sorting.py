"""Classic comparison sorts over lists of integers.

Every sort returns a new list and leaves its argument untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "merge_sort",
    "quick_sort",
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "is_sorted",
    "format_array",
]


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # "<=" keeps equal elements in their original order.
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(arr: list[int], low: int, high: int) -> int:
    pivot = arr[low]
    i, j = low, high
    while i < j:
        while arr[i] <= pivot and i <= high - 1:
            i += 1
        while arr[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            arr[i], arr[j] = arr[j], arr[i]
    arr[low], arr[j] = arr[j], arr[low]
    return j


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by quicksort with the first element as pivot."""
    arr = list(values)
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(arr, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return arr


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by bubble sort."""
    arr = list(values)
    for end in range(len(arr) - 1, 0, -1):
        for j in range(end):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
    return arr


def _heapify(arr: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and arr[left] > arr[largest]:
            largest = left
        if right < size and arr[right] > arr[largest]:
            largest = right
        if largest == root:
            return
        arr[root], arr[largest] = arr[largest], arr[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by heap sort on a max-heap."""
    arr = list(values)
    n = len(arr)
    for i in range(n // 2 - 1, -1, -1):
        _heapify(arr, n, i)
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _heapify(arr, end, 0)
    return arr


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by insertion sort."""
    arr = list(values)
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key
    return arr


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the sequence is in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def format_array(values: Iterable[int]) -> str:
    """Render values as ``[a, b, c]``."""
    return "[" + ", ".join(str(v) for v in values) + "]"