from minim.types.expression import EvaluatorFn, SExpression, LispValue
from minim.types.errors import MinimArityError, MinimTypeError
from minim.types.environment import Environment
from minim.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Evaluates `value` in the current frame and binds it there. The result is
    the symbol, not the value.
    """
    if not tail:
        raise MinimArityError("expected first form")

    name = tail[0]
    if not isinstance(name, Symbol):
        raise MinimTypeError("expected first form to be a symbol")
    if len(tail) < 2:
        raise MinimArityError("expected second form")
    if len(tail) > 2:
        raise MinimArityError("def can only have two forms")

    value = evaluate_fn(tail[1], env)
    env.define(name, value)
    return name
