import pytest

from algodeck.calculator import calculate, main


def test_addition():
    assert calculate("+", 1.5, 2.5) == pytest.approx(4.0)


def test_subtraction_antisymmetric():
    assert calculate("-", 7, 3) == -calculate("-", 3, 7)


def test_multiplication_commutative():
    assert calculate("*", 6, -4) == calculate("*", -4, 6)


def test_division_inverts_multiplication():
    product = calculate("*", 9.5, 4)
    assert calculate("/", product, 4) == pytest.approx(9.5)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="Division by zero is not allowed."):
        calculate("/", 1, 0)


def test_invalid_operator():
    with pytest.raises(ValueError, match="Invalid operator."):
        calculate("%", 1, 2)


def test_main_prints_result(capsys):
    assert main(["+", "2", "3"]) == 0
    assert "Result: 5.00" in capsys.readouterr().out


def test_main_reports_division_by_zero(capsys):
    assert main(["/", "1", "0"]) == 1
    assert "Error: Division by zero is not allowed." in capsys.readouterr().out


def test_main_prompts_for_missing(monkeypatch, capsys):
    answers = iter(["*", "2", "4"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert "Result: 8.00" in capsys.readouterr().out