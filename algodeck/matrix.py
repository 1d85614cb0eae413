"""Integer matrix addition, multiplication and display."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["multiply", "add", "format_matrix"]


def _shape(matrix: Iterable[Iterable[int]], name: str) -> tuple[list[list[int]], int, int]:
    rows = [list(row) for row in matrix]
    cols = len(rows[0]) if rows else 0
    if any(len(row) != cols for row in rows):
        raise ValueError(f"{name} is not rectangular")
    return rows, len(rows), cols


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Matrix product a x b."""
    a_rows, _, a_cols = _shape(a, "first matrix")
    b_rows, b_count, _ = _shape(b, "second matrix")
    if a_cols != b_count:
        raise ValueError("Cannot multiply matrices.")
    columns = list(zip(*b_rows))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a_rows
    ]


def add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Element-wise sum of two matrices of the same shape."""
    a_rows, a_count, a_cols = _shape(a, "first matrix")
    b_rows, b_count, b_cols = _shape(b, "second matrix")
    if (a_count, a_cols) != (b_count, b_cols):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a_rows, b_rows)]


def format_matrix(matrix: Iterable[Iterable[int]]) -> str:
    """One line per row, each value followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)