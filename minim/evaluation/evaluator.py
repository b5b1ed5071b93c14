"""Core evaluator for the minim interpreter.

Atoms evaluate to themselves, symbols resolve through the environment chain,
and a non-empty list is either a special form (dispatched on the unevaluated
head symbol) or an application of the evaluated head.
"""

from __future__ import annotations

from minim.types.expression import (
    SExpression,
    LispValue,
    Boolean,
    Number,
    List,
    Builtin,
    Closure,
)
from minim.types.environment import Environment
from minim.types.symbol import Symbol
from minim.types.errors import MinimTypeError, MinimUnboundSymbol
from minim.evaluation.apply import apply
from minim.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Boolean() | Number():
            return expr

        case Symbol():
            value = env.lookup(expr)
            if value is None:
                raise MinimUnboundSymbol(f"unexpected symbol k='{expr}'")
            return value

        case List(items=()):
            raise MinimTypeError("expected a non-empty list")

        case List(items=(head, *tail_args)):
            # --- Special forms take precedence over any binding of the head ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)
            return apply(evaluate(head, env), tail_args, env, evaluate)

        case Builtin() | Closure():
            # Only meaningful as the result of evaluating a head position
            raise MinimTypeError("unexpected form")

    raise MinimTypeError("unexpected form")
