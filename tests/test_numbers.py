import pytest

from algodeck.numbers import (
    factorial,
    factorial_recursive,
    fibonacci,
    gcd,
    is_buzz_number,
    is_prime,
    main,
    primes_up_to,
    reverse_number,
    sum_natural,
)


def test_reverse_number_values():
    assert reverse_number(1234) == 4321
    assert reverse_number(-123) == -321
    assert reverse_number(0) == 0


@pytest.mark.parametrize("n", [1, 12, 907, 123456, -58])
def test_reverse_number_round_trip(n):
    assert reverse_number(reverse_number(n)) == n


def test_factorial_examples():
    assert factorial(5) == 120
    assert factorial(7) == 5040
    assert factorial(0) == 1


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_variants_agree(n):
    assert factorial_recursive(n) == factorial(n)


@pytest.mark.parametrize("n", range(1, 15))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)
    with pytest.raises(ValueError):
        factorial_recursive(-3)


def test_gcd_example():
    assert gcd(12, 18) == 6


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (100, 75), (0, 9), (-12, 18)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert g > 0
    assert a % g == 0 and b % g == 0
    assert gcd(a // g, b // g) == 1


def test_is_prime():
    assert is_prime(29)
    assert is_prime(2)
    assert not is_prime(1)
    assert not is_prime(0)
    assert not is_prime(-7)
    assert not is_prime(49)


def test_primes_up_to_matches_trial_division():
    for n in (0, 1, 2, 10, 50, 97, 200):
        assert primes_up_to(n) == [k for k in range(n + 1) if is_prime(k)]


def test_primes_up_to_small_bound():
    assert primes_up_to(1) == []
    assert primes_up_to(2) == [2]


def test_fibonacci_example():
    assert fibonacci(5) == 5
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


@pytest.mark.parametrize("n", [0, 1, 5, 100])
def test_sum_natural(n):
    assert sum_natural(n) == sum(range(n + 1))


def test_sum_natural_negative_raises():
    with pytest.raises(ValueError):
        sum_natural(-2)


def test_is_buzz_number():
    assert is_buzz_number(14)
    assert is_buzz_number(17)
    assert is_buzz_number(7)
    assert not is_buzz_number(22)
    assert not is_buzz_number(-17)
    assert is_buzz_number(-14)


def test_main_prime(capsys):
    assert main(["prime", "29"]) == 0
    assert capsys.readouterr().out == "29 is a prime number.\n"


def test_main_not_prime(capsys):
    assert main(["prime", "12"]) == 0
    assert capsys.readouterr().out == "12 is not a prime number.\n"


def test_main_non_numeric_reads_as_zero(capsys):
    main(["prime", "abc"])
    assert capsys.readouterr().out == "0 is not a prime number.\n"


def test_main_sieve(capsys):
    assert main(["sieve", "30"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Primes <= 30:"
    assert [int(p) for p in lines[1].split()] == primes_up_to(30)


def test_main_sieve_small(capsys):
    main(["sieve", "1"])
    assert capsys.readouterr().out == "No primes <= 1\n"


def test_main_missing_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["prime"])
    assert excinfo.value.code == 2