"""Small console games: tic-tac-toe, rock-paper-scissors and number guessing."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from enum import Enum

__all__ = [
    "TicTacToe",
    "Outcome",
    "CHOICES",
    "rps_outcome",
    "GuessResult",
    "GuessingGame",
    "main",
]

_EMPTY = " "
_LINES = [
    *(
        line
        for i in range(3)
        for line in (
            [(i, 0), (i, 1), (i, 2)],
            [(0, i), (1, i), (2, i)],
        )
    ),
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]


class TicTacToe:
    """A two-player game on a 3x3 board; X moves first."""

    def __init__(self) -> None:
        self.board = [[_EMPTY] * 3 for _ in range(3)]
        self.player = "X"

    def winner(self) -> str | None:
        """The mark holding a full line, or None."""
        for line in _LINES:
            marks = {self.board[r][c] for r, c in line}
            if len(marks) == 1 and _EMPTY not in marks:
                return marks.pop()
        return None

    def moves_left(self) -> bool:
        """Whether any cell is still empty."""
        return any(cell == _EMPTY for row in self.board for cell in row)

    @property
    def over(self) -> bool:
        return self.winner() is not None or not self.moves_left()

    def play(self, cell: int) -> str | None:
        """Mark cell 1..9 for the player to move; return the winner, if any.

        The turn passes to the other player unless the game has ended.
        """
        if self.over:
            raise RuntimeError("the game is over")
        if not 1 <= cell <= 9:
            raise ValueError("Choose a number between 1 and 9.")
        r, c = divmod(cell - 1, 3)
        if self.board[r][c] != _EMPTY:
            raise ValueError("Cell already taken. Choose another.")
        self.board[r][c] = self.player
        winner = self.winner()
        if winner is None and self.moves_left():
            self.player = "O" if self.player == "X" else "X"
        return winner

    def render(self) -> str:
        """The board, empty cells showing their numbers."""
        rows = [
            "|".join(
                f" {r * 3 + c + 1} " if mark == _EMPTY else f" {mark} "
                for c, mark in enumerate(row)
            )
            for r, row in enumerate(self.board)
        ]
        return "\n---+---+---\n".join(rows) + "\n"


CHOICES = ("Rock", "Paper", "Scissors")


class Outcome(Enum):
    TIE = "It's a tie!"
    WIN = "You win!"
    LOSS = "Computer wins!"


_BEATS = {(1, 3), (2, 1), (3, 2)}


def rps_outcome(user: int, computer: int) -> Outcome:
    """Result of a round for the user; choices are 1 rock, 2 paper, 3 scissors."""
    for choice in (user, computer):
        if not 1 <= choice <= 3:
            raise ValueError("Invalid choice!")
    if user == computer:
        return Outcome.TIE
    return Outcome.WIN if (user, computer) in _BEATS else Outcome.LOSS


class GuessResult(Enum):
    TOO_LOW = "Too low! Try again."
    TOO_HIGH = "Too high! Try again."
    CORRECT = "Correct!"


class GuessingGame:
    """Guess a hidden number, by default drawn from 1..100."""

    def __init__(
        self,
        number: int | None = None,
        rng: random.Random | None = None,
        low: int = 1,
        high: int = 100,
    ) -> None:
        if low > high:
            raise ValueError("empty range")
        if number is None:
            number = (rng if rng is not None else random.Random()).randint(low, high)
        self.number = number
        self.low = low
        self.high = high
        self.attempts = 0
        self.solved = False

    def guess(self, value: int) -> GuessResult:
        """Count an attempt and compare value with the hidden number."""
        self.attempts += 1
        if value < self.number:
            return GuessResult.TOO_LOW
        if value > self.number:
            return GuessResult.TOO_HIGH
        self.solved = True
        return GuessResult.CORRECT


def _ask_again() -> bool:
    return input("Play again? (y/n): ").strip()[:1] in ("y", "Y")


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _tictactoe() -> None:
    while True:
        game = TicTacToe()
        print("Tic-Tac-Toe (CLI)")
        print("Players: X and O")
        print("Enter cell numbers 1-9 as shown on board to place your mark.")
        while not game.over:
            print("\nCurrent board:")
            print(game.render())
            while True:
                cell = _read_int(f"Player {game.player}, enter your move (1-9): ")
                if cell is None:
                    print("Invalid input. Please enter a number 1-9.")
                    continue
                try:
                    game.play(cell)
                except ValueError as error:
                    print(error)
                    continue
                break
        print("\nCurrent board:")
        print(game.render())
        winner = game.winner()
        print(f"Player {winner} wins!" if winner else "It's a draw!")
        if not _ask_again():
            break
    print("Thanks for playing! Goodbye.")


def _rps(rng: random.Random) -> None:
    print("Welcome to Rock-Paper-Scissors!")
    print("1: Rock, 2: Paper, 3: Scissors")
    user = _read_int("Enter your choice: ")
    if user is None or not 1 <= user <= 3:
        print("Invalid choice!")
        return
    computer = rng.randint(1, 3)
    print(f"You chose: {CHOICES[user - 1]}")
    print(f"Computer chose: {CHOICES[computer - 1]}")
    print(rps_outcome(user, computer).value)


def _guess(rng: random.Random) -> None:
    while True:
        game = GuessingGame(rng=rng)
        print("Welcome to the Number Guessing Game!")
        print(f"I have chosen a number between {game.low} and {game.high}.")
        while not game.solved:
            value = _read_int("Enter your guess: ")
            if value is None:
                print("Please enter a whole number.")
                continue
            result = game.guess(value)
            if result is GuessResult.CORRECT:
                print(
                    f"Congratulations! You guessed the number {game.number} "
                    f"in {game.attempts} attempts."
                )
            else:
                print(result.value)
        if not _ask_again():
            break
    print("Thanks for playing! Goodbye!")


def main(argv: Sequence[str] | None = None) -> int:
    """Play one of the console games."""
    parser = argparse.ArgumentParser(prog="algodeck-games")
    parser.add_argument("game", choices=["tictactoe", "rps", "guess"])
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    try:
        if args.game == "tictactoe":
            _tictactoe()
        elif args.game == "rps":
            _rps(rng)
        else:
            _guess(rng)
    except EOFError:
        print()
    return 0