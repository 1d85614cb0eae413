import pytest

from algodeck.backtracking import (
    NQueensSolver,
    format_board,
    place_eight_queens,
    solve_sudoku,
    tower_of_hanoi,
)

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def is_valid_queens(solution):
    n = len(solution)
    for r1 in range(n):
        for r2 in range(r1 + 1, n):
            c1, c2 = solution[r1], solution[r2]
            if c1 == c2 or abs(c1 - c2) == r2 - r1:
                return False
    return True


def test_eight_queens_board_is_valid():
    board = place_eight_queens()
    assert len(board) == 8
    assert all(sum(row) == 1 for row in board)
    columns = [row.index(1) for row in board]
    assert is_valid_queens(columns)


def test_eight_queens_matches_first_solver_solution():
    board = place_eight_queens()
    columns = [row.index(1) for row in board]
    assert columns == NQueensSolver(8).first_solution()


def test_four_queens_solutions():
    assert list(NQueensSolver(4).solutions()) == [[1, 3, 0, 2], [2, 0, 3, 1]]


def test_eight_queens_count():
    assert NQueensSolver(8).count_solutions() == 92


def test_three_queens_has_no_solution():
    solver = NQueensSolver(3)
    assert solver.count_solutions() == 0
    assert solver.first_solution() is None


@pytest.mark.parametrize("n", range(1, 8))
def test_every_solution_is_valid_and_counted(n):
    solver = NQueensSolver(n)
    found = list(solver.solutions())
    assert all(is_valid_queens(s) and len(s) == n for s in found)
    assert solver.count_solutions() == len(found)
    assert len({tuple(s) for s in found}) == len(found)


@pytest.mark.parametrize("n", [-1, 21])
def test_board_size_out_of_range(n):
    with pytest.raises(ValueError):
        NQueensSolver(n)


def test_format_board():
    text = format_board([1, 3, 0, 2])
    lines = text.splitlines()
    assert lines[0] == ". Q . . "
    assert lines[2] == "Q . . . "
    assert len(lines) == 4
    assert text.count("Q") == 4


def test_sudoku_example():
    assert solve_sudoku(PUZZLE) == SOLVED


def test_sudoku_leaves_input_untouched():
    before = [row[:] for row in PUZZLE]
    solve_sudoku(PUZZLE)
    assert PUZZLE == before


def test_sudoku_without_solution():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[1][8] = 9
    assert solve_sudoku(grid) is None


def test_sudoku_rejects_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])


def test_hanoi_three_disks():
    assert tower_of_hanoi(3, "A", "C", "B") == [
        (1, "A", "C"),
        (2, "A", "B"),
        (1, "C", "B"),
        (3, "A", "C"),
        (1, "B", "A"),
        (2, "B", "C"),
        (1, "A", "C"),
    ]


@pytest.mark.parametrize("n", range(0, 8))
def test_hanoi_moves_are_legal(n):
    rods = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    moves = tower_of_hanoi(n)
    assert len(moves) == 2**n - 1
    for disk, src, dst in moves:
        assert rods[src][-1] == disk
        rods[src].pop()
        assert not rods[dst] or rods[dst][-1] > disk
        rods[dst].append(disk)
    assert rods["C"] == list(range(n, 0, -1))


def test_hanoi_negative():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)