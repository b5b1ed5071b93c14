# Core type aliases and entry points for minim.
#
# Parsed code and runtime values share one closed union (see
# minim.types.expression):
# - SExpression: use in reader/evaluator code for syntactic forms.
# - LispValue:  use for evaluated values.
# Both resolve to `Expression`.

from minim.types.expression import Expression, SExpression, LispValue, EvaluatorFn
from minim.types.errors import ExitRequest, MinimError
from minim.interpreter import Interpreter, default_env, evaluate_text

__all__ = [
    "EvaluatorFn",
    "ExitRequest",
    "Expression",
    "Interpreter",
    "LispValue",
    "MinimError",
    "SExpression",
    "default_env",
    "evaluate_text",
]
