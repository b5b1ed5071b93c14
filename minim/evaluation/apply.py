"""Application engine for minim.

Centralizes function application semantics:
- Builtins receive their already-evaluated arguments as a list.
- Closures get a fresh frame whose parent is the caller's frame, bound with
  parameter -> argument pairs, and their body is evaluated once in it.

Argument forms are always evaluated left to right in the caller's frame; the
first failure propagates.
"""

from __future__ import annotations

from minim.types.expression import (
    EvaluatorFn,
    SExpression,
    LispValue,
    Builtin,
    Closure,
    List,
)
from minim.types.environment import Environment
from minim.types.symbol import Symbol
from minim.types.errors import MinimArityError, MinimTypeError


def closure_params(params: SExpression) -> list[Symbol]:
    """Validate a closure's parameter expression as a List of Symbols."""
    if not isinstance(params, List):
        raise MinimTypeError("expected args form to be a list")
    symbols = []
    for p in params:
        if not isinstance(p, Symbol):
            raise MinimTypeError("expected symbols in the argument list")
        symbols.append(p)
    return symbols


def apply_closure(
    fn: Closure,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to unevaluated argument forms from the caller's frame.

    Parameters are validated here rather than at `fn` time, then the arity is
    checked before any argument is evaluated.
    """
    formals = closure_params(fn.params)
    if len(formals) != len(arg_forms):
        raise MinimArityError(
            f"expected {len(formals)} arguments, got {len(arg_forms)}"
        )

    args = [evaluate_fn(form, env) for form in arg_forms]
    call_env = Environment(outer=env)
    for name, value in zip(formals, args):
        call_env.define(name, value)
    return evaluate_fn(fn.body, call_env)


def apply_builtin(
    fn: Builtin,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    args = [evaluate_fn(form, env) for form in arg_forms]
    return fn(args)


def apply(
    head: LispValue,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Builtin; anything else is a type error."""
    match head:
        case Closure():
            return apply_closure(head, arg_forms, env, evaluate_fn)
        case Builtin():
            return apply_builtin(head, arg_forms, env, evaluate_fn)
        case _:
            raise MinimTypeError("first form must be a function")
