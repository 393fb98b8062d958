[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mathsolvers"
version = "0.1.0"
description = "Solvers for classic counting, number-theory, probability and game problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "combinatorics",
    "number theory",
    "modular arithmetic",
    "matrix exponentiation",
    "probability",
    "game theory",
    "nim",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mathsolvers = "mathsolvers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mathsolvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
