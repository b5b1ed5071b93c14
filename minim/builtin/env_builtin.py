"""Built-in functions for the minim root environment.

Arithmetic (`+`, `-`) and chained numeric comparison (`=`, `>`, `>=`, `<`,
`<=`). Every builtin receives its already-evaluated arguments as a list and
returns a single Expression.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from minim.types.expression import LispValue, Builtin, Boolean, Number
from minim.types.environment import Environment
from minim.types.symbol import Symbol
from minim.types.errors import MinimTypeError, MinimArityError


def numbers(expr: list[LispValue]) -> list[float]:
    """Unwrap every argument as a float; errors on the first non-Number."""
    floats = []
    for x in expr:
        if not isinstance(x, Number):
            raise MinimTypeError("expected a number")
        floats.append(x.value)
    return floats


# -------------------------------
# Arithmetic
# -------------------------------
def fold_sum(floats: list[float]) -> float:
    """Plain left-to-right float addition, without compensated rounding."""
    return reduce(operator.add, floats, 0.0)


def add(expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; (+) is 0."""
    return Number(fold_sum(numbers(expr)))


def sub(expr: list[LispValue]) -> LispValue:
    """Subtract the sum of the remaining numbers from the first."""
    floats = numbers(expr)
    if not floats:
        raise MinimArityError("expected at least one number")
    first, *rest = floats
    return Number(first - fold_sum(rest))


# -------------------------------
# Comparison
# -------------------------------
def chained(relation: Callable[[float, float], bool]) -> Callable[[list[LispValue]], LispValue]:
    """Build a variadic comparison that holds iff `relation` holds for each adjacent pair."""

    def compare(expr: list[LispValue]) -> LispValue:
        floats = numbers(expr)
        if not floats:
            raise MinimArityError("expected at least one number")
        return Boolean(all(relation(a, b) for a, b in zip(floats, floats[1:])))

    return compare


BUILTINS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "=": chained(operator.eq),
    ">": chained(operator.gt),
    ">=": chained(operator.ge),
    "<": chained(operator.lt),
    "<=": chained(operator.le),
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
