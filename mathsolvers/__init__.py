"""Solvers for counting, number-theory, probability and game problems, with a command line front end."""

__version__ = "0.1.0"

__all__ = ["cli", "divisors", "games", "matrices", "modular", "probability"]