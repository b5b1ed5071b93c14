"""Session entry points: compose tokenize -> parse -> evaluate.

`evaluate_text` is the single call a read loop needs. `Interpreter` keeps one
root Environment alive so definitions persist across calls.
"""

from __future__ import annotations

import logging

from minim.types.expression import LispValue
from minim.types.environment import Environment
from minim.types.errors import MinimRecursionError
from minim.reader.lexer import tokenize
from minim.reader.parser import parse
from minim.evaluation.evaluator import evaluate
from minim.builtin.env_builtin import register

logger = logging.getLogger(__name__)


def default_env() -> Environment:
    """Fresh root frame with the builtin library registered."""
    env = Environment()
    register(env)
    return env


def evaluate_text(source: str, env: Environment) -> LispValue:
    """Evaluate the first form in `source` against `env`.

    Tokens after the first complete form are ignored. Raises MinimError on any
    language-level failure and ExitRequest for the `exit` form.
    """
    try:
        expr, rest = parse(tokenize(source))
        logger.debug("parsed %s", expr)
        if rest:
            logger.debug("ignoring %d trailing token(s)", len(rest))
        result = evaluate(expr, env)
    except RecursionError:
        # Deeply nested input or runaway language-level recursion
        logger.warning("host recursion limit reached while evaluating %r", source[:80])
        raise MinimRecursionError("maximum recursion depth exceeded") from None
    logger.debug("evaluated %s => %s", expr, result)
    return result


class Interpreter:
    """
    Holds the root Environment for one session.
    Definitions made by earlier calls to `eval` are visible to later ones.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else default_env()

    def eval(self, code: str) -> LispValue:
        return evaluate_text(code, self.env)
