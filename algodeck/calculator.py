"""A four-function calculator."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

__all__ = ["calculate", "main"]


def calculate(operator: str, a: float, b: float) -> float:
    """Apply one of ``+ - * /`` to a and b."""
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if operator == "/":
        if b == 0:
            raise ZeroDivisionError("Division by zero is not allowed.")
        return a / b
    raise ValueError("Invalid operator.")


def main(argv: Sequence[str] | None = None) -> int:
    """Compute one result; any operand not given is asked for."""
    parser = argparse.ArgumentParser(prog="algodeck-calc")
    parser.add_argument("operator", nargs="?")
    parser.add_argument("first", nargs="?")
    parser.add_argument("second", nargs="?")
    args = parser.parse_args(argv)

    print("Welcome to the Calculator App!")
    try:
        operator = args.operator
        if operator is None:
            operator = input("Enter an operator (+, -, *, /): ").strip()
        first = args.first if args.first is not None else input("Enter first number: ")
        second = args.second if args.second is not None else input("Enter second number: ")
        result = calculate(operator, float(first), float(second))
    except (ValueError, ZeroDivisionError) as error:
        print(f"Error: {error}")
        return 1
    except EOFError:
        print("Error: no input.")
        return 1
    print(f"Result: {result:.2f}")
    return 0