"""Divisor counting, common divisors and divisor sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

MOD = 1_000_000_007


def divisor_counts(limit: int) -> list[int]:
    """Return a list whose entry ``k`` is the number of divisors of ``k``, for ``0 <= k <= limit``."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    counts = [0] * (limit + 1)
    for d in range(1, limit + 1):
        for multiple in range(d, limit + 1, d):
            counts[multiple] += 1
    return counts


def count_divisors(values: Iterable[int]) -> list[int]:
    """Return the number of divisors of each value, in order."""
    values = list(values)
    if not values:
        return []
    if min(values) < 1:
        raise ValueError("values must be positive")
    counts = divisor_counts(max(values))
    return [counts[value] for value in values]


def max_common_divisor(values: Iterable[int]) -> int:
    """Return the greatest gcd over all pairs of the given positive values."""
    occurrences = Counter(values)
    if sum(occurrences.values()) < 2:
        raise ValueError("at least two values are needed")
    if min(occurrences) < 1:
        raise ValueError("values must be positive")
    top = max(occurrences)
    for candidate in range(top, 0, -1):
        found = 0
        for multiple in range(candidate, top + 1, candidate):
            found += occurrences.get(multiple, 0)
            if found >= 2:
                return candidate
    raise AssertionError("unreachable: 1 divides every value")


def _triangular(n: int) -> int:
    return n * (n + 1) // 2 % MOD


def sum_of_divisors(n: int) -> int:
    """Return the sum of sigma(k) for ``1 <= k <= n`` modulo MOD."""
    if n < 0:
        raise ValueError("n must be non-negative")
    total = 0
    low = 1
    while low <= n:
        quotient = n // low
        high = n // quotient
        block = (_triangular(high) - _triangular(low - 1)) % MOD
        total = (total + block * quotient) % MOD
        low = high + 1
    return total