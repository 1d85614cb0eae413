import random

import pytest

from algodeck.searching import (
    binary_search,
    exponential_search,
    fibonacci_search,
    jump_search,
    linear_search,
)

BINARY_DEMO = [2, 5, 8, 12, 16, 23, 38, 56, 67, 78]
EXPONENTIAL_DEMO = [2, 3, 4, 10, 40, 50, 60]
FIBONACCI_DEMO = [1, 4, 5, 7, 9, 11, 13, 16, 18, 20, 25, 27, 30, 32, 33, 36, 39, 41, 44, 47, 51, 53, 55]
JUMP_DEMO = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610]
LINEAR_DEMO = [10, 50, 30, 70, 80, 60, 20, 90, 40]


def _sorted_unique(seed, size):
    rng = random.Random(seed)
    return sorted(rng.sample(range(-500, 500), size))


def _sorted_results(values, target):
    return [
        binary_search(values, target),
        exponential_search(values, target),
        fibonacci_search(values, target),
        jump_search(values, target),
    ]


def test_binary_search_documented_example():
    assert binary_search(BINARY_DEMO, 23) == 5


@pytest.mark.parametrize("target", [2, 23, 78])
def test_binary_search_demo_targets_found(target):
    index = binary_search(BINARY_DEMO, target)
    assert BINARY_DEMO[index] == target


@pytest.mark.parametrize("target", [15, 100])
def test_binary_search_demo_targets_missing(target):
    assert binary_search(BINARY_DEMO, target) is None


def test_binary_search_ends():
    assert binary_search(BINARY_DEMO, 2) == 0
    assert binary_search(BINARY_DEMO, 78) == len(BINARY_DEMO) - 1


def test_exponential_search_demo():
    assert exponential_search(EXPONENTIAL_DEMO, 10) == EXPONENTIAL_DEMO.index(10)


def test_fibonacci_search_demo():
    assert fibonacci_search(FIBONACCI_DEMO, 30) == FIBONACCI_DEMO.index(30)


def test_jump_search_demo():
    assert jump_search(JUMP_DEMO, 55) == JUMP_DEMO.index(55)


def test_linear_search_demo_unsorted():
    for value in LINEAR_DEMO:
        assert linear_search(LINEAR_DEMO, value) == LINEAR_DEMO.index(value)
    assert linear_search(LINEAR_DEMO, 35) is None


def test_linear_search_returns_first_occurrence():
    assert linear_search([4, 7, 4, 7], 7) == 1


def test_empty_sequence_finds_nothing():
    assert binary_search([], 3) is None
    assert exponential_search([], 3) is None
    assert fibonacci_search([], 3) is None
    assert jump_search([], 3) is None
    assert linear_search([], 3) is None


def test_single_element():
    assert binary_search([9], 9) == 0
    assert exponential_search([9], 9) == 0
    assert fibonacci_search([9], 9) == 0
    assert jump_search([9], 9) == 0
    assert linear_search([9], 9) == 0
    for missing in (8, 10):
        assert binary_search([9], missing) is None
        assert exponential_search([9], missing) is None
        assert fibonacci_search([9], missing) is None
        assert jump_search([9], missing) is None
        assert linear_search([9], missing) is None


@pytest.mark.parametrize("seed,size", [(1, 2), (2, 5), (3, 13), (4, 21), (5, 40), (6, 100)])
def test_sorted_searches_find_every_present_value(seed, size):
    values = _sorted_unique(seed, size)
    for expected, value in enumerate(values):
        assert binary_search(values, value) == expected
        assert exponential_search(values, value) == expected
        assert fibonacci_search(values, value) == expected
        assert jump_search(values, value) == expected


@pytest.mark.parametrize("seed,size", [(7, 3), (8, 8), (9, 34), (10, 55)])
def test_sorted_searches_miss_absent_values(seed, size):
    values = _sorted_unique(seed, size)
    present = set(values)
    probes = [values[0] - 1, values[-1] + 1] + [v for v in range(-501, 501) if v not in present][:40]
    for probe in probes:
        assert binary_search(values, probe) is None
        assert exponential_search(values, probe) is None
        assert fibonacci_search(values, probe) is None
        assert jump_search(values, probe) is None


def test_sorted_searches_with_duplicates_land_on_a_match():
    values = [1, 2, 2, 2, 3, 3, 5, 8, 8, 8, 8, 13]
    for target in set(values):
        for index in _sorted_results(values, target):
            assert values[index] == target
        assert values[binary_search(values, target)] == target
        assert values[jump_search(values, target)] == target


def test_fibonacci_search_repeated_calls_with_different_lengths():
    short = _sorted_unique(11, 6)
    long = _sorted_unique(12, 60)
    for _ in range(2):
        assert [fibonacci_search(short, v) for v in short] == list(range(len(short)))
        assert [fibonacci_search(long, v) for v in long] == list(range(len(long)))