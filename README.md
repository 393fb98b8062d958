# mathsolvers

Solvers for a set of classic mathematical problems: modular arithmetic and
binomial coefficients, divisor functions, matrix exponentiation for
recurrences and graph walks, small probability puzzles, and impartial games.

Results that can grow without bound are reported modulo 1 000 000 007, and
probabilities are returned as floats. Invalid arguments raise `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Modular arithmetic and counting (`mathsolvers.modular`)

```python
from mathsolvers.modular import (
    MOD, BinomialTable, power, inverse, tower_power,
    count_arrangements, distribute_apples, derangements,
)

power(2, 10)                   # 1024 (modulus defaults to MOD)
inverse(2)                     # 500000004
tower_power(2, 3, 2)           # 2 ** (3 ** 2) modulo MOD

table = BinomialTable(100)     # factorials for 0 <= n < 100
table.factorial(5)             # 120
table.binomial(5, 2)           # 10

count_arrangements("aabac")    # distinct orderings of the letters: 20
distribute_apples(3, 2)        # ways to share 2 apples among 3 children: 6
derangements(4)                # 9
```

### Divisors (`mathsolvers.divisors`)

```python
from mathsolvers.divisors import (
    divisor_counts, count_divisors, max_common_divisor, sum_of_divisors,
)

divisor_counts(6)              # [0, 1, 2, 2, 3, 2, 4]
count_divisors([16, 17, 18])   # [5, 2, 6]
max_common_divisor([3, 14, 15, 7, 9])   # largest gcd of any pair: 7
sum_of_divisors(5)             # sigma(1) + ... + sigma(5) modulo MOD: 21
```

### Matrix exponentiation (`mathsolvers.matrices`)

```python
from mathsolvers.matrices import (
    fibonacci, dice_combinations, count_routes, shortest_route,
    mat_mul, mat_pow, min_plus_mul, min_plus_pow,
)

fibonacci(10)                  # 55
dice_combinations(3)           # ordered dice throws summing to 3: 4

edges = [(1, 2), (2, 3), (1, 3)]
count_routes(3, edges, 2)      # walks of exactly 2 edges from 1 to 3: 1

weighted = [(1, 2, 5), (2, 3, 4), (1, 3, 20)]
shortest_route(3, weighted, 2) # cheapest walk of exactly 2 edges: 9
```

Vertices are numbered from 1. `shortest_route` returns `-1` when no walk of
exactly `k` edges exists. `mat_pow` raises a square matrix to a power with
entries reduced modulo `MOD`; `min_plus_pow` does the same in the (min, +)
semiring, where `math.inf` marks a missing edge.

### Probability (`mathsolvers.probability`)

```python
from mathsolvers.probability import (
    candy_lottery, dice_probability, inversion_probability, moving_robots,
)

candy_lottery(2, 3)            # expected maximum of 2 draws from 1..3: 2.444...
dice_probability(2, 9, 10)     # chance that two dice sum to 9..10: 0.1944...
inversion_probability([5, 2, 7])   # expected number of inversions
moving_robots(10)              # expected empty squares on an 8x8 board
```

### Games (`mathsolvers.games`)

```python
from mathsolvers.games import (
    nim_winner, nim_winner_limited, stair_winner, stick_game,
)

nim_winner([1, 2, 3])          # "second"
nim_winner_limited([4, 5])     # "first" (each move takes one to three sticks)
stair_winner([0, 2, 1])        # "first"
stick_game(10, [1, 3, 4])      # "WLWWWWLWLW" for heaps of 1..10 sticks
```

## Command line

The `mathsolvers` command takes the name of a problem, reads that problem's
input as whitespace-separated tokens from standard input and prints the
answer. Probabilities are printed with six decimals.

```
mathsolvers --help
echo "10" | mathsolvers fibonacci
```

| Problem | Input |
| --- | --- |
| `binomial` | `q`, then `q` pairs `a b` |
| `exponentiation` | `q`, then `q` pairs `a b` |
| `exponentiation-tower` | `q`, then `q` triples `a b c` |
| `creating-strings` | a word |
| `distributing-apples` | `children apples` |
| `christmas-party` | `n` |
| `counting-divisors` | `n`, then `n` values |
| `common-divisors` | `n`, then `n` values |
| `sum-of-divisors` | `n` |
| `fibonacci` | `n` |
| `throwing-dice` | `n` |
| `graph-paths` | `n m k`, then `m` edges `u v` |
| `graph-paths-weighted` | `n m k`, then `m` edges `u v w` |
| `candy-lottery` | `children candies` |
| `dice-probability` | `n low high` |
| `inversion-probability` | `n`, then `n` limits |
| `moving-robots` | `k` |
| `nim`, `nim-limited`, `stair-game` | `t`, then per test `n` and `n` values |
| `stick-game` | `n k`, then `k` allowed moves |

On malformed or invalid input the command prints `error: ...` to standard
error and exits with status 1.

## Limitations

Each run of the command solves one problem from standard input; there is no
option to read from or write to files.