# algodeck

A compact library of classic algorithms and data structures, plus a handful of
small interactive console programs built on top of them. It needs nothing
beyond the Python standard library (Python 3.10 or newer).

## Installation

```
pip install algodeck
```

To run the test suite:

```
pip install "algodeck[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodeck.sorting` | `merge_sort`, `quick_sort`, `bubble_sort`, `heap_sort`, `insertion_sort`, `is_sorted`, `format_array` |
| `algodeck.numbers` | `reverse_number`, `factorial`, `factorial_recursive`, `gcd`, `is_prime`, `primes_up_to`, `fibonacci`, `sum_natural`, `is_buzz_number` |
| `algodeck.searching` | `binary_search`, `exponential_search`, `fibonacci_search`, `jump_search`, `linear_search` |
| `algodeck.arrays` | `majority_element` (Moore's voting), `max_subarray_sum` (Kadane) |
| `algodeck.strings` | `min_steps_to_anagram`, `is_palindrome`, `devowel`, `spellcheck` |
| `algodeck.linked` | `ListNode`, `LinkedList`, `LinkedQueue`, `MultiLevelNode`, `flatten`, `from_values`, `to_values`, `reverse_list`, `swap_pairs` |
| `algodeck.graphs` | `Graph` with `add_edge`, `neighbours`, `bfs`, `dfs`; `dijkstra_matrix`, `dijkstra` |
| `algodeck.trees` | `TreeNode`, `pre_order`, `in_order`, `post_order`, `height`, `is_balanced`, `is_symmetric`, `max_width`, `count_in_range`, `bst_search` |
| `algodeck.backtracking` | `place_eight_queens`, `NQueensSolver`, `format_board`, `solve_sudoku`, `tower_of_hanoi` |
| `algodeck.knapsack` | `Item`, `knapsack` (0/1), `fractional_knapsack` |
| `algodeck.matrix` | `multiply`, `add`, `format_matrix` |
| `algodeck.maze` | `generate_maze`, `solve_maze`, `render`, and the cell marks `WALL`, `PATH`, `SOLUTION` |
| `algodeck.hexagon` | `hexagon` |
| `algodeck.calculator` | `calculate` |
| `algodeck.games` | `TicTacToe`, `rps_outcome` with `Outcome` and `CHOICES`, `GuessingGame` with `GuessResult` |
| `algodeck.hospital` | `Patient`, `Hospital` (patients kept most severe first), `HospitalFullError` |
| `algodeck.records` | `Record`, `RecordStore` (add, update, delete, search, sort_by_age, stats, save, load, clear), `Stats`, `StoreFullError` |
| `algodeck.students` | `Student`, `grade_for`, `sorted_by_score`, `write_records` |
| `algodeck.todo` | `TodoList`, `TodoFullError` |
| `algodeck.stack` | `Stack` (bounded), `StackFullError` |

## Examples

```python
from algodeck.sorting import merge_sort, is_sorted
from algodeck.searching import binary_search
from algodeck.numbers import gcd, is_prime, primes_up_to
from algodeck.arrays import max_subarray_sum
from algodeck.strings import min_steps_to_anagram

data = merge_sort([64, 34, 25, 12, 22, 11, 90, 5])
assert is_sorted(data)

binary_search([2, 5, 8, 12, 16, 23, 38, 56, 67, 78], 23)   # 5
binary_search([2, 5, 8], 7)                                # None
gcd(12, 18)                                                # 6
is_prime(29)                                               # True
primes_up_to(20)                                           # [2, 3, 5, 7, 11, 13, 17, 19]
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])          # 6
min_steps_to_anagram("leetcode", "practice")               # 5
```

The sorting functions take any iterable of integers and return a new sorted
list, leaving their argument untouched. The search functions return the index
of the target, or `None` when it is absent; all but `linear_search` expect the
values in ascending order.

Invalid input raises an exception rather than returning a sentinel: popping an
empty `Stack` or dequeuing an empty `LinkedQueue` raises `IndexError`, dividing
by zero in `calculate` raises `ZeroDivisionError`, and adding to a full
`Stack`, `Hospital`, `RecordStore` or `TodoList` raises the module's own
"full" error.

```python
from algodeck.backtracking import NQueensSolver, tower_of_hanoi

NQueensSolver(8).count_solutions()   # 92
tower_of_hanoi(2)                    # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

```python
import random
from algodeck.maze import generate_maze, solve_maze, render

grid = generate_maze(11, 21, random.Random(1))
print(render(solve_maze(grid)))
```

## Command-line programs

Installing the package provides these console programs:

```
algodeck-numbers prime 29     # tell whether a number is prime
algodeck-numbers sieve 50     # list the primes up to a bound
algodeck-dijkstra [FILE]      # shortest distances; reads node count, edge count,
                              # "u v weight" triples and a start node (stdin by default)
algodeck-maze ROWS COLS [--seed N]   # generate a random maze and print it solved
algodeck-calculator [OP A B]  # four-function calculator; asks for anything not given
algodeck-games {tictactoe,rps,guess} [--seed N]
algodeck-hospital             # patient queue ordered by severity
algodeck-records [--file db.txt]   # record manager, loaded from and saved to a text file
algodeck-todo                 # numbered to-do list
```

## Limits

Only `algodeck-records` keeps anything between runs. The hospital ward, the
to-do list and the games hold their state in memory and lose it on exit.