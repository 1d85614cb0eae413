import random

import pytest

from algodeck.games import (
    CHOICES,
    GuessingGame,
    GuessResult,
    Outcome,
    TicTacToe,
    main,
    rps_outcome,
)


def _play(cells):
    game = TicTacToe()
    result = None
    for cell in cells:
        result = game.play(cell)
    return game, result


def test_row_win_for_x():
    game, result = _play([1, 4, 2, 5, 3])
    assert result == "X"
    assert game.winner() == "X"
    assert game.player == "X"


def test_column_win_for_o():
    game, result = _play([1, 2, 4, 5, 9, 8])
    assert result == "O"


def test_diagonal_win():
    game, result = _play([3, 1, 5, 2, 7])
    assert result == "X"


def test_draw():
    game, result = _play([1, 2, 3, 5, 4, 6, 8, 7, 9])
    assert result is None
    assert game.winner() is None
    assert not game.moves_left()
    assert game.over


def test_turns_alternate():
    game = TicTacToe()
    game.play(5)
    assert game.player == "O"
    game.play(1)
    assert game.player == "X"


def test_invalid_cell():
    with pytest.raises(ValueError, match="between 1 and 9"):
        TicTacToe().play(10)


def test_taken_cell():
    game = TicTacToe()
    game.play(5)
    with pytest.raises(ValueError, match="already taken"):
        game.play(5)


def test_play_after_end():
    game, _ = _play([1, 4, 2, 5, 3])
    with pytest.raises(RuntimeError):
        game.play(9)


def test_render_empty_board():
    text = TicTacToe().render()
    lines = text.splitlines()
    assert lines[1] == "---+---+---"
    assert lines[0] == " 1 | 2 | 3 "


def test_render_shows_marks():
    game = TicTacToe()
    game.play(1)
    assert game.render().splitlines()[0].startswith(" X |")


def test_rps_ties():
    for choice in (1, 2, 3):
        assert rps_outcome(choice, choice) is Outcome.TIE


def test_rps_rock_beats_scissors():
    assert rps_outcome(1, 3) is Outcome.WIN
    assert rps_outcome(3, 1) is Outcome.LOSS


def test_rps_antisymmetric():
    for user in (1, 2, 3):
        for computer in (1, 2, 3):
            if user != computer:
                pair = {rps_outcome(user, computer), rps_outcome(computer, user)}
                assert pair == {Outcome.WIN, Outcome.LOSS}


def test_rps_invalid():
    with pytest.raises(ValueError, match="Invalid choice!"):
        rps_outcome(4, 1)


def test_guessing_game_feedback():
    game = GuessingGame(number=42)
    assert game.guess(10) is GuessResult.TOO_LOW
    assert game.guess(50) is GuessResult.TOO_HIGH
    assert game.guess(42) is GuessResult.CORRECT
    assert game.attempts == 3
    assert game.solved


def test_guessing_game_random_in_range():
    for seed in range(20):
        game = GuessingGame(rng=random.Random(seed))
        assert 1 <= game.number <= 100


def test_main_tictactoe(monkeypatch, capsys):
    answers = iter(["1", "4", "abc", "2", "5", "3", "n"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["tictactoe"]) == 0
    out = capsys.readouterr().out
    assert "Invalid input. Please enter a number 1-9." in out
    assert "Player X wins!" in out
    assert "Thanks for playing! Goodbye." in out


def test_main_rps_invalid(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "0")
    assert main(["rps", "--seed", "1"]) == 0
    assert "Invalid choice!" in capsys.readouterr().out


def test_main_rps_round(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "1")
    main(["rps", "--seed", "2"])
    out = capsys.readouterr().out
    assert f"You chose: {CHOICES[0]}" in out
    assert any(outcome.value in out for outcome in Outcome)