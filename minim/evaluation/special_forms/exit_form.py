from minim.types.expression import EvaluatorFn, SExpression, LispValue, Number
from minim.types.errors import ExitRequest, MinimArityError, MinimTypeError
from minim.types.environment import Environment


def exit_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (exit) or (exit status)
    Never returns a value: raises ExitRequest so the embedding session decides
    how to terminate.
    """
    if len(tail) > 1:
        raise MinimArityError("exit can only have one form")
    if not tail:
        raise ExitRequest(0)

    match evaluate_fn(tail[0], env):
        case Number(value=status) if status.is_integer():
            raise ExitRequest(int(status))
        case _:
            raise MinimTypeError("expected exit status to be an integral number")
