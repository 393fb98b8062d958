"""Command line front end: read a problem's input on stdin and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from mathsolvers.divisors import count_divisors, max_common_divisor, sum_of_divisors
from mathsolvers.games import nim_winner, nim_winner_limited, stair_winner, stick_game
from mathsolvers.matrices import count_routes, dice_combinations, fibonacci, shortest_route
from mathsolvers.modular import (
    BinomialTable,
    count_arrangements,
    derangements,
    distribute_apples,
    power,
    tower_power,
)
from mathsolvers.probability import (
    candy_lottery,
    dice_probability,
    inversion_probability,
    moving_robots,
)


class _Tokens:
    """Whitespace-separated tokens of the input."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


def _lines(values) -> str:
    return "\n".join(str(value) for value in values)


def _fixed(value: float) -> str:
    return f"{value:.6f}"


def _binomial(tokens: _Tokens) -> str:
    queries = [tuple(tokens.integers(2)) for _ in range(tokens.integer())]
    if not queries:
        return ""
    table = BinomialTable(max(a for a, _ in queries) + 1)
    return _lines(table.binomial(a, b) for a, b in queries)


def _exponentiation(tokens: _Tokens) -> str:
    queries = [tokens.integers(2) for _ in range(tokens.integer())]
    return _lines(power(a, b) for a, b in queries)


def _exponentiation_tower(tokens: _Tokens) -> str:
    queries = [tokens.integers(3) for _ in range(tokens.integer())]
    return _lines(tower_power(a, b, c) for a, b, c in queries)


def _creating_strings(tokens: _Tokens) -> str:
    return str(count_arrangements(tokens.word()))


def _distributing_apples(tokens: _Tokens) -> str:
    children, apples = tokens.integers(2)
    return str(distribute_apples(children, apples))


def _christmas_party(tokens: _Tokens) -> str:
    return str(derangements(tokens.integer()))


def _counting_divisors(tokens: _Tokens) -> str:
    return _lines(count_divisors(tokens.integers(tokens.integer())))


def _common_divisors(tokens: _Tokens) -> str:
    return str(max_common_divisor(tokens.integers(tokens.integer())))


def _sum_of_divisors(tokens: _Tokens) -> str:
    return str(sum_of_divisors(tokens.integer()))


def _fibonacci(tokens: _Tokens) -> str:
    return str(fibonacci(tokens.integer()))


def _throwing_dice(tokens: _Tokens) -> str:
    return str(dice_combinations(tokens.integer()))


def _graph_paths(tokens: _Tokens) -> str:
    n, m, k = tokens.integers(3)
    edges = [tuple(tokens.integers(2)) for _ in range(m)]
    return str(count_routes(n, edges, k))


def _graph_paths_weighted(tokens: _Tokens) -> str:
    n, m, k = tokens.integers(3)
    edges = [tuple(tokens.integers(3)) for _ in range(m)]
    return str(shortest_route(n, edges, k))


def _candy_lottery(tokens: _Tokens) -> str:
    children, candies = tokens.integers(2)
    return _fixed(candy_lottery(children, candies))


def _dice_probability(tokens: _Tokens) -> str:
    n, low, high = tokens.integers(3)
    return _fixed(dice_probability(n, low, high))


def _inversion_probability(tokens: _Tokens) -> str:
    return _fixed(inversion_probability(tokens.integers(tokens.integer())))


def _moving_robots(tokens: _Tokens) -> str:
    return _fixed(moving_robots(tokens.integer()))


def _per_test(judge: Callable[[list[int]], str]) -> Callable[[_Tokens], str]:
    def solve(tokens: _Tokens) -> str:
        return _lines(
            judge(tokens.integers(tokens.integer())) for _ in range(tokens.integer())
        )

    return solve


def _stick_game(tokens: _Tokens) -> str:
    n, k = tokens.integers(2)
    return stick_game(n, tokens.integers(k))


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "binomial": _binomial,
    "exponentiation": _exponentiation,
    "exponentiation-tower": _exponentiation_tower,
    "creating-strings": _creating_strings,
    "distributing-apples": _distributing_apples,
    "christmas-party": _christmas_party,
    "counting-divisors": _counting_divisors,
    "common-divisors": _common_divisors,
    "sum-of-divisors": _sum_of_divisors,
    "fibonacci": _fibonacci,
    "throwing-dice": _throwing_dice,
    "graph-paths": _graph_paths,
    "graph-paths-weighted": _graph_paths_weighted,
    "candy-lottery": _candy_lottery,
    "dice-probability": _dice_probability,
    "inversion-probability": _inversion_probability,
    "moving-robots": _moving_robots,
    "nim": _per_test(nim_winner),
    "nim-limited": _per_test(nim_winner_limited),
    "stair-game": _per_test(stair_winner),
    "stick-game": _stick_game,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mathsolvers",
        description="Solve a mathematics problem whose input is read from stdin.",
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS), help="problem to solve")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver named on the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        output = _SOLVERS[args.problem](_Tokens(sys.stdin.read()))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())