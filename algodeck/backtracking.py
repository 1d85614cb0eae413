"""Backtracking puzzles: queens, Sudoku and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = [
    "place_eight_queens",
    "NQueensSolver",
    "format_board",
    "solve_sudoku",
    "tower_of_hanoi",
]


def _queen_is_safe(board: Sequence[int], row: int, col: int) -> bool:
    """Whether a queen at (row, col) is clear of the queens in earlier rows."""
    return all(
        c != col and c - r != col - row and c + r != col + row
        for r, c in enumerate(board[:row])
    )


def place_eight_queens() -> list[list[int]]:
    """An 8x8 board of 0s and 1s holding eight mutually safe queens."""
    size = 8
    board = [[0] * size for _ in range(size)]

    def safe(row: int, col: int) -> bool:
        for r in range(row):
            if board[r][col]:
                return False
            offset = row - r
            if col - offset >= 0 and board[r][col - offset]:
                return False
            if col + offset < size and board[r][col + offset]:
                return False
        return True

    def place(row: int) -> bool:
        if row == size:
            return True
        for col in range(size):
            if safe(row, col):
                board[row][col] = 1
                if place(row + 1):
                    return True
                board[row][col] = 0
        return False

    place(0)
    return board


class NQueensSolver:
    """Finds placements of n queens on an n x n board.

    A solution lists, for each row, the column holding its queen.
    """

    MAX_N = 20

    def __init__(self, n: int) -> None:
        if not 0 <= n <= self.MAX_N:
            raise ValueError(f"board size must be between 0 and {self.MAX_N}")
        self.n = n

    def _extend(self, board: list[int]) -> Iterator[list[int]]:
        row = len(board)
        if row == self.n:
            yield list(board)
            return
        for col in range(self.n):
            if _queen_is_safe(board, row, col):
                board.append(col)
                yield from self._extend(board)
                board.pop()

    def solutions(self) -> Iterator[list[int]]:
        """Every solution, in lexicographic order of columns."""
        return self._extend([])

    def first_solution(self) -> list[int] | None:
        """The first solution found, or None when there is none."""
        return next(self.solutions(), None)

    def count_solutions(self) -> int:
        """Number of distinct solutions."""
        return sum(1 for _ in self.solutions())


def format_board(solution: Sequence[int]) -> str:
    """Draw a solution with ``Q`` for queens and ``.`` for empty squares."""
    n = len(solution)
    return "".join(
        "".join("Q " if solution[row] == col else ". " for col in range(n)) + "\n"
        for row in range(n)
    )


_SIZE = 9


def _sudoku_safe(grid: list[list[int]], row: int, col: int, num: int) -> bool:
    if num in grid[row]:
        return False
    if any(grid[r][col] == num for r in range(_SIZE)):
        return False
    top, left = row - row % 3, col - col % 3
    return all(
        grid[r][c] != num for r in range(top, top + 3) for c in range(left, left + 3)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the zeros of a 9x9 grid; return the solved copy, or None if impossible.

    Given digits are taken as they are and are not checked against each other.
    """
    if len(grid) != _SIZE or any(len(row) != _SIZE for row in grid):
        raise ValueError("grid must be 9x9")
    work = [list(row) for row in grid]
    if any(not 0 <= value <= 9 for row in work for value in row):
        raise ValueError("grid cells must hold 0..9")

    empties = [
        (r, c) for r in range(_SIZE) for c in range(_SIZE) if work[r][c] == 0
    ]

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for num in range(1, 10):
            if _sudoku_safe(work, row, col, num):
                work[row][col] = num
                if fill(index + 1):
                    return True
                work[row][col] = 0
        return False

    return work if fill(0) else None


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> list[tuple[int, str, str]]:
    """Moves ``(disk, from_rod, to_rod)`` that carry n disks from source to target."""
    if n < 0:
        raise ValueError("number of disks must be non-negative")
    moves: list[tuple[int, str, str]] = []

    def move(k: int, src: str, dst: str, via: str) -> None:
        if k == 0:
            return
        move(k - 1, src, via, dst)
        moves.append((k, src, dst))
        move(k - 1, via, dst, src)

    move(n, source, target, auxiliary)
    return moves