from minim.types.expression import EvaluatorFn, SExpression, LispValue, Closure
from minim.types.errors import MinimArityError
from minim.types.environment import Environment


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn (params) body): both forms stay unevaluated and are shared, not copied.
    # The parameter list is only checked when the closure is applied.
    if len(tail) > 2:
        raise MinimArityError("fn definition can only have two forms")
    if not tail:
        raise MinimArityError("expected args form")
    if len(tail) < 2:
        raise MinimArityError("expected body form")

    params, body = tail
    return Closure(params, body)
