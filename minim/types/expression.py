"""Expression model shared by parsed code and runtime values.

The language is homoiconic: a parsed `(+ 1 2)` and a list value produced at
runtime are the same `List` variant. The variant set is closed:

    Boolean | Symbol | Number | List | Builtin | Closure

`Builtin` and `Closure` are never produced by the parser; they only appear as
the result of evaluating a head position or a `fn` form.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Union

from minim.types.symbol import Symbol


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Number:
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class List:
    items: tuple[Expression, ...] = ()

    def __post_init__(self):
        # Contents are fixed at construction
        object.__setattr__(self, "items", tuple(self.items))

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    def __str__(self) -> str:
        return "(" + ",".join(str(x) for x in self.items) + ")"


@dataclass(frozen=True, eq=False)
class Builtin:
    """A native primitive exposed as a callable language value."""

    name: str
    fn: Callable[[list[Expression]], Expression]

    def __call__(self, args: list[Expression]) -> Expression:
        return self.fn(args)

    def __str__(self) -> str:
        return f"<builtin {self.name}>"


@dataclass(frozen=True, eq=False)
class Closure:
    """A deferred function: an unevaluated parameter list and body.

    No frame is captured. At call time the caller's active frame becomes the
    parent of the fresh call frame. `params` is only checked to be a List of
    Symbols when the closure is applied.
    """

    params: Expression
    body: Expression

    def __str__(self) -> str:
        return "<closure>"


Expression = Union[Boolean, Symbol, Number, List, Builtin, Closure]

# Naming guidance (kept from the reader/evaluator split):
# - SExpression: syntactic forms handed to the evaluator.
# - LispValue:  evaluated values.
# Both resolve to the same closed union.
SExpression = Expression
LispValue = Expression

# Evaluator function type handed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]


def format_number(value: float) -> str:
    """Render a float as plain decimal text: `3`, `0.5`, `0.0000001`."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # Shortest round-trip digits, written out positionally: 1e23 -> 100000000000000000000000
    text = format(Decimal(repr(value)), "f")
    return text[:-2] if text.endswith(".0") else text


TRUE = Boolean(True)
FALSE = Boolean(False)
