"""Text mazes: random depth-first generation and a depth-first solver."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

__all__ = ["WALL", "PATH", "SOLUTION", "generate_maze", "solve_maze", "render", "main"]

WALL = "#"
PATH = " "
SOLUTION = "."

# North, south, east, west.
_DIRECTIONS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def generate_maze(
    rows: int, cols: int, rng: random.Random | None = None
) -> list[list[str]]:
    """A maze carved from (1, 1) by randomised depth-first search.

    The entrance is at (0, 1) and the exit at (rows - 1, cols - 2). Odd
    sizes give a maze whose exit is always reachable.
    """
    if rows < 3 or cols < 3:
        raise ValueError("maze must be at least 3x3")
    rng = rng if rng is not None else random.Random()
    grid = [[WALL] * cols for _ in range(rows)]

    def shuffled() -> list[tuple[int, int]]:
        directions = list(_DIRECTIONS)
        rng.shuffle(directions)
        return directions

    grid[1][1] = PATH
    stack = [(1, 1, iter(shuffled()))]
    while stack:
        r, c, directions = stack[-1]
        for dr, dc in directions:
            nr, nc = r + 2 * dr, c + 2 * dc
            if 0 < nr < rows - 1 and 0 < nc < cols - 1 and grid[nr][nc] == WALL:
                grid[r + dr][c + dc] = PATH
                grid[nr][nc] = PATH
                stack.append((nr, nc, iter(shuffled())))
                break
        else:
            stack.pop()

    grid[0][1] = PATH
    grid[rows - 1][cols - 2] = PATH
    return grid


def solve_maze(grid: Sequence[Sequence[str]]) -> list[list[str]] | None:
    """A copy of grid with a path from entrance to exit marked, or None.

    The walk tries north, south, east and west in that order; the exit
    cell itself is left unmarked.
    """
    work = [list(row) for row in grid]
    rows = len(work)
    cols = len(work[0]) if work else 0
    if rows < 2 or cols < 2:
        raise ValueError("maze is too small")
    start = (0, 1)
    end = (rows - 1, cols - 2)
    if start == end:
        return work
    if work[start[0]][start[1]] != PATH:
        return None

    work[start[0]][start[1]] = SOLUTION
    stack = [(start[0], start[1], iter(_DIRECTIONS))]
    while stack:
        r, c, directions = stack[-1]
        for dr, dc in directions:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            if (nr, nc) == end:
                return work
            if work[nr][nc] == PATH:
                work[nr][nc] = SOLUTION
                stack.append((nr, nc, iter(_DIRECTIONS)))
                break
        else:
            work[r][c] = PATH
            stack.pop()
    return None


def render(grid: Sequence[Sequence[str]]) -> str:
    """The maze as text, one line per row."""
    return "".join("".join(row) + "\n" for row in grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a maze of the given size, print it, then print it solved."""
    parser = argparse.ArgumentParser(prog="algodeck-maze")
    parser.add_argument("rows", type=int, help="odd numbers recommended")
    parser.add_argument("cols", type=int, help="odd numbers recommended")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        grid = generate_maze(args.rows, args.cols, random.Random(args.seed))
    except ValueError as error:
        parser.error(str(error))

    print("\nGenerated Maze:")
    print(render(grid), end="")
    solved = solve_maze(grid)
    if solved is None:
        print("No solution found!")
    else:
        print("\nSolved Maze:")
        print(render(solved), end="")
    return 0