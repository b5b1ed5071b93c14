from minim.types.expression import EvaluatorFn, SExpression, LispValue, Boolean
from minim.types.errors import MinimArityError, MinimTypeError
from minim.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test then else)
    The test must evaluate to a Boolean; there is no truthiness.
    """
    if not tail:
        raise MinimArityError("expected test form")

    test_form = tail[0]
    match evaluate_fn(test_form, env):
        case Boolean(value=True):
            idx = 1
        case Boolean(value=False):
            idx = 2
        case _:
            raise MinimTypeError(f"unexpected test form='{test_form}'")

    if idx >= len(tail):
        raise MinimArityError(f"expected form idx={idx}")
    return evaluate_fn(tail[idx], env)
