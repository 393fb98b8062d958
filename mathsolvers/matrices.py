"""Matrix powers over the integers modulo MOD and over the (min, +) semiring."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from mathsolvers.modular import MOD

Matrix = list[list[int]]
INF = math.inf


def _check_square(matrix: Sequence[Sequence[float]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the product ``a @ b`` with entries reduced modulo MOD."""
    if a and len(a[0]) != len(b):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) % MOD for column in columns]
        for row in a
    ]


def mat_pow(matrix: Sequence[Sequence[int]], exponent: int) -> Matrix:
    """Return ``matrix`` raised to ``exponent`` modulo MOD."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    size = _check_square(matrix)
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    base = [[value % MOD for value in row] for row in matrix]
    while exponent:
        if exponent & 1:
            result = mat_mul(result, base)
        base = mat_mul(base, base)
        exponent >>= 1
    return result


def min_plus_mul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the (min, +) product of ``a`` and ``b``; ``math.inf`` marks no path."""
    if a and len(a[0]) != len(b):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [
        [min((x + y for x, y in zip(row, column)), default=INF) for column in columns]
        for row in a
    ]


def min_plus_pow(matrix: Sequence[Sequence[float]], exponent: int) -> list[list[float]]:
    """Return ``matrix`` raised to ``exponent`` in the (min, +) semiring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    size = _check_square(matrix)
    result: list[list[float]] = [
        [0 if i == j else INF for j in range(size)] for i in range(size)
    ]
    base = [list(row) for row in matrix]
    while exponent:
        if exponent & 1:
            result = min_plus_mul(result, base)
        base = min_plus_mul(base, base)
        exponent >>= 1
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number modulo MOD, with F(0) = 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return mat_pow([[0, 1], [1, 1]], n)[0][1]


def dice_combinations(n: int) -> int:
    """Return the number of ordered dice sequences summing to ``n`` modulo MOD."""
    if n < 1:
        raise ValueError("n must be positive")
    if n <= 6:
        return 1 << (n - 1)
    step = [[int(j == i + 1) for j in range(6)] for i in range(5)]
    step.append([1] * 6)
    last_row = mat_pow(step, n - 6)[5]
    return sum((1 << i) * value for i, value in enumerate(last_row)) % MOD


def _check_vertices(n: int, u: int, v: int) -> None:
    if not (1 <= u <= n and 1 <= v <= n):
        raise ValueError(f"edge ({u}, {v}) leaves the graph of {n} vertices")


def count_routes(n: int, edges: Iterable[tuple[int, int]], k: int) -> int:
    """Return the number of walks of exactly ``k`` edges from vertex 1 to ``n``."""
    if n < 1:
        raise ValueError("graph must have at least one vertex")
    adjacency = [[0] * n for _ in range(n)]
    for u, v in edges:
        _check_vertices(n, u, v)
        adjacency[u - 1][v - 1] += 1
    return mat_pow(adjacency, k)[0][n - 1]


def shortest_route(n: int, edges: Iterable[tuple[int, int, int]], k: int) -> int:
    """Return the least weight of a walk of exactly ``k`` edges from 1 to ``n``, or -1."""
    if n < 1:
        raise ValueError("graph must have at least one vertex")
    weights: list[list[float]] = [[INF] * n for _ in range(n)]
    for u, v, w in edges:
        _check_vertices(n, u, v)
        weights[u - 1][v - 1] = min(weights[u - 1][v - 1], w)
    best = min_plus_pow(weights, k)[0][n - 1]
    return -1 if best == INF else int(best)