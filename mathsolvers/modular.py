"""Modular arithmetic and combinatorics modulo 1_000_000_007."""

from __future__ import annotations

from collections import Counter

MOD = 1_000_000_007


def power(base: int, exponent: int, modulus: int = MOD) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def inverse(value: int, modulus: int = MOD) -> int:
    """Return the multiplicative inverse of ``value`` for a prime ``modulus``."""
    return power(value, modulus - 2, modulus)


def tower_power(a: int, b: int, c: int) -> int:
    """Return ``a ** (b ** c)`` modulo MOD, reducing the exponent by Fermat."""
    return power(a, power(b, c, MOD - 1))


class BinomialTable:
    """Factorials modulo MOD for ``0 <= n < size`` and binomials built on them."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._factorials = [1] * size
        for i in range(1, size):
            self._factorials[i] = self._factorials[i - 1] * i % MOD

    @property
    def size(self) -> int:
        return len(self._factorials)

    def factorial(self, n: int) -> int:
        """Return ``n!`` modulo MOD."""
        if not 0 <= n < len(self._factorials):
            raise ValueError(f"factorial of {n} is outside the table")
        return self._factorials[n]

    def binomial(self, n: int, k: int) -> int:
        """Return ``C(n, k)`` modulo MOD."""
        if n < 0 or not 0 <= k <= n:
            raise ValueError(f"binomial({n}, {k}) is undefined")
        numerator = self.factorial(n)
        denominator = self.factorial(k) * self.factorial(n - k) % MOD
        return numerator * inverse(denominator) % MOD


def count_arrangements(word: str) -> int:
    """Return the number of distinct rearrangements of ``word`` modulo MOD."""
    table = BinomialTable(len(word) + 1)
    result = table.factorial(len(word))
    for count in Counter(word).values():
        result = result * inverse(table.factorial(count)) % MOD
    return result


def distribute_apples(children: int, apples: int) -> int:
    """Return the ways to share ``apples`` among ``children`` modulo MOD."""
    if children < 1:
        raise ValueError("there must be at least one child")
    if apples < 0:
        raise ValueError("apples must be non-negative")
    table = BinomialTable(children + apples)
    return table.binomial(children + apples - 1, children - 1)


def derangements(n: int) -> int:
    """Return the number of derangements of ``n`` items modulo MOD."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 1
    previous, current = 1, 0
    for i in range(2, n + 1):
        previous, current = current, (i - 1) * (current + previous) % MOD
    return current