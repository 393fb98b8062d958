"""Expected values and probabilities for dice, lotteries, permutations and robots."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

_BOARD = 8
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def candy_lottery(children: int, candies: int) -> float:
    """Return the expected maximum of ``children`` uniform draws from 1..``candies``."""
    if children < 0:
        raise ValueError("children must be non-negative")
    if candies < 1:
        raise ValueError("candies must be positive")
    at_most = [0.0] + [(i / candies) ** children for i in range(1, candies + 1)]
    return sum(
        (at_most[i] - at_most[i - 1]) * i for i in range(candies, 0, -1)
    )


def dice_probability(n: int, low: int, high: int) -> float:
    """Return the probability that ``n`` dice sum to a value in ``[low, high]``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if low < 0 or high < 0:
        raise ValueError("bounds must be non-negative")
    sums = [1.0] + [0.0] * high
    for _ in range(n):
        sums = [
            sum(sums[j - face] for face in range(1, min(j, 6) + 1)) / 6.0
            for j in range(high + 1)
        ]
    return sum(sums[low : high + 1])


def inversion_probability(limits: Sequence[int]) -> float:
    """Return the expected inversions when item ``i`` is uniform on 1..``limits[i]``."""
    if any(limit < 1 for limit in limits):
        raise ValueError("limits must be positive")
    total = 0.0
    for first, second in combinations(limits, 2):
        low = min(first, second)
        inverted = low * (low - 1) // 2
        if first > second:
            inverted += (first - second) * second
        total += inverted / (first * second)
    return total


def _walk(start: tuple[int, int], k: int) -> list[list[float]]:
    grid = [[0.0] * _BOARD for _ in range(_BOARD)]
    grid[start[0]][start[1]] = 1.0
    for _ in range(k):
        nxt = [[0.0] * _BOARD for _ in range(_BOARD)]
        for x, row in enumerate(grid):
            for y, mass in enumerate(row):
                targets = [
                    (x + dx, y + dy)
                    for dx, dy in _STEPS
                    if 0 <= x + dx < _BOARD and 0 <= y + dy < _BOARD
                ]
                share = mass / len(targets)
                for u, v in targets:
                    nxt[u][v] += share
        grid = nxt
    return grid


def moving_robots(k: int) -> float:
    """Return the expected number of empty squares after ``k`` random robot moves."""
    if k < 0:
        raise ValueError("k must be non-negative")
    empty = [[1.0] * _BOARD for _ in range(_BOARD)]
    for i in range(_BOARD):
        for j in range(_BOARD):
            occupied = _walk((i, j), k)
            for x in range(_BOARD):
                for y in range(_BOARD):
                    empty[x][y] *= 1.0 - occupied[x][y]
    return sum(sum(row) for row in empty)