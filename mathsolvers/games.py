"""Winners of impartial games: Nim, the restricted Nim, the staircase game and stick removal."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor

FIRST = "first"
SECOND = "second"


def _check_heaps(heaps: Sequence[int]) -> None:
    if any(heap < 0 for heap in heaps):
        raise ValueError("heap sizes must be non-negative")


def _winner(nim_sum: int) -> str:
    return FIRST if nim_sum else SECOND


def nim_winner(heaps: Iterable[int]) -> str:
    """Return "first" or "second": who wins ordinary Nim on ``heaps``."""
    heaps = list(heaps)
    _check_heaps(heaps)
    return _winner(reduce(xor, heaps, 0))


def nim_winner_limited(heaps: Iterable[int]) -> str:
    """Return who wins Nim when a move takes between one and three sticks."""
    heaps = list(heaps)
    _check_heaps(heaps)
    return _winner(reduce(xor, (heap % 4 for heap in heaps), 0))


def stair_winner(stairs: Iterable[int]) -> str:
    """Return who wins the staircase game; ``stairs[0]`` is the floor-level stair."""
    stairs = list(stairs)
    _check_heaps(stairs)
    return _winner(reduce(xor, stairs[1::2], 0))


def stick_game(n: int, moves: Iterable[int]) -> str:
    """Return a string of W/L for heaps of 1..``n`` sticks with the allowed ``moves``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    allowed = sorted(set(moves))
    if any(move < 1 for move in allowed):
        raise ValueError("moves must be positive")
    winning = [False] * (n + 1)
    for sticks in range(1, n + 1):
        winning[sticks] = any(
            not winning[sticks - move] for move in allowed if move <= sticks
        )
    return "".join("W" if won else "L" for won in winning[1:])