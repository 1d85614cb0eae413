"""Small number-theory helpers and a command for prime checks and sieving."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence

__all__ = [
    "reverse_number",
    "factorial",
    "factorial_recursive",
    "gcd",
    "is_prime",
    "primes_up_to",
    "fibonacci",
    "sum_natural",
    "is_buzz_number",
    "main",
]


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of n, keeping its sign."""
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    reversed_value = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return sign * reversed_value


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def factorial(n: int) -> int:
    """Compute n! iteratively."""
    _check_non_negative(n)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def factorial_recursive(n: int) -> int:
    """Compute n! recursively."""
    _check_non_negative(n)
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n <= 1:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def primes_up_to(n: int) -> list[int]:
    """All primes less than or equal to n, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    flags = [True] * (n + 1)
    flags[0] = flags[1] = False
    p = 2
    while p * p <= n:
        if flags[p]:
            flags[p * p :: p] = [False] * len(range(p * p, n + 1, p))
        p += 1
    return [value for value, prime in enumerate(flags) if prime]


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("Position must be non-negative.")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def sum_natural(n: int) -> int:
    """Sum of the integers 1..n."""
    _check_non_negative(n)
    return n * (n + 1) // 2


def is_buzz_number(n: int) -> bool:
    """A Buzz number is divisible by 7 or ends in the digit 7."""
    return n % 7 == 0 or (n > 0 and n % 10 == 7)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Check a number for primality or list the primes up to a bound."""
    parser = argparse.ArgumentParser(prog="algodeck-numbers")
    commands = parser.add_subparsers(dest="command", required=True)
    prime_cmd = commands.add_parser("prime", help="check whether a number is prime")
    prime_cmd.add_argument("number")
    sieve_cmd = commands.add_parser("sieve", help="list primes up to a bound")
    sieve_cmd.add_argument("number")
    args = parser.parse_args(argv)

    n = _atoi(args.number)
    if args.command == "prime":
        verdict = "is" if is_prime(n) else "is not"
        print(f"{n} {verdict} a prime number.")
        return 0

    if n < 2:
        print(f"No primes <= {n}")
        return 0
    print(f"Primes <= {n}:")
    print(" ".join(str(p) for p in primes_up_to(n)))
    return 0