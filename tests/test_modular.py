import itertools
import math

import pytest

from mathsolvers.modular import (
    MOD,
    BinomialTable,
    count_arrangements,
    derangements,
    distribute_apples,
    inverse,
    power,
    tower_power,
)


@pytest.mark.parametrize(
    "base, exponent",
    [(3, 4), (2, 0), (0, 0), (123456789, 987654321), (MOD + 5, 17), (10**9, 10**9)],
)
def test_power_matches_builtin(base, exponent):
    assert power(base, exponent) == pow(base, exponent, MOD)


def test_power_custom_modulus():
    assert power(7, 13, 97) == pow(7, 13, 97)


def test_power_negative_exponent_rejected():
    with pytest.raises(ValueError):
        power(2, -1)


@pytest.mark.parametrize("value", [1, 2, 12345, MOD - 1, 10**9])
def test_inverse_is_multiplicative_inverse(value):
    assert value * inverse(value) % MOD == 1


@pytest.mark.parametrize("a, b, c", [(3, 7, 1), (15, 2, 2), (2, 3, 4), (5, 0, 3), (9, 4, 0)])
def test_tower_power_matches_direct(a, b, c):
    assert tower_power(a, b, c) == pow(a, b**c, MOD)


def test_factorial_table_matches_math():
    table = BinomialTable(30)
    for n in range(30):
        assert table.factorial(n) == math.factorial(n) % MOD


def test_factorial_outside_table_rejected():
    table = BinomialTable(5)
    with pytest.raises(ValueError):
        table.factorial(5)


@pytest.mark.parametrize("n, k", [(5, 3), (10, 0), (10, 10), (40, 17), (60, 30)])
def test_binomial_matches_math(n, k):
    table = BinomialTable(61)
    assert table.binomial(n, k) == math.comb(n, k) % MOD


def test_binomial_invalid_arguments_rejected():
    table = BinomialTable(10)
    with pytest.raises(ValueError):
        table.binomial(3, 5)
    with pytest.raises(ValueError):
        table.binomial(3, -1)


def test_binomial_table_size_must_be_positive():
    with pytest.raises(ValueError):
        BinomialTable(0)


@pytest.mark.parametrize("word", ["aabac", "abc", "aaaa", "abab", ""])
def test_count_arrangements_matches_permutations(word):
    assert count_arrangements(word) == len(set(itertools.permutations(word)))


@pytest.mark.parametrize("children, apples", [(1, 4), (3, 2), (2, 5), (4, 0), (3, 4)])
def test_distribute_apples_matches_enumeration(children, apples):
    expected = sum(
        1
        for shares in itertools.product(range(apples + 1), repeat=children)
        if sum(shares) == apples
    )
    assert distribute_apples(children, apples) == expected


def test_distribute_apples_requires_children():
    with pytest.raises(ValueError):
        distribute_apples(0, 3)


@pytest.mark.parametrize("n", range(0, 8))
def test_derangements_matches_enumeration(n):
    expected = sum(
        1
        for perm in itertools.permutations(range(n))
        if all(value != index for index, value in enumerate(perm))
    )
    assert derangements(n) == expected


def test_derangements_recurrence_holds_for_large_n():
    n = 1000
    assert derangements(n) == (n - 1) * (derangements(n - 1) + derangements(n - 2)) % MOD


def test_derangements_negative_rejected():
    with pytest.raises(ValueError):
        derangements(-1)