"""
  Recursive-descent parser for minim.

- LL(1) on token kind, no backtracking
- `(` ... `)`     -> List
- true / false    -> Boolean
- float literals  -> Number
- anything else   -> Symbol

`parse` consumes a prefix of the token list and hands back what is left, so a
caller can tell whether trailing tokens remain. The top-level `read` helper
ignores them: one form per input line.
"""

from __future__ import annotations

import re
from typing import Sequence

from minim.types.errors import MinimSyntaxError
from minim.types.expression import SExpression, Boolean, Number, List, TRUE, FALSE
from minim.types.symbol import Symbol
from minim.reader.lexer import tokenize


# Decimal float grammar plus inf/infinity/nan spellings.
FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

ATOMS: dict[str, Boolean] = {
    "true": TRUE,
    "false": FALSE,
}


def parse_atom(token: str) -> SExpression:
    """Classify a single non-parenthesis token."""
    if token in ATOMS:
        return ATOMS[token]
    if FLOAT_RE.fullmatch(token):
        return Number(float(token))
    return Symbol(token)


def _parse_at(tokens: Sequence[str], pos: int) -> tuple[SExpression, int]:
    if pos >= len(tokens):
        raise MinimSyntaxError("could not get token")

    token = tokens[pos]
    if token == "(":
        return _read_seq(tokens, pos + 1)
    if token == ")":
        raise MinimSyntaxError("unexpected )")
    return parse_atom(token), pos + 1


def _read_seq(tokens: Sequence[str], pos: int) -> tuple[SExpression, int]:
    items: list[SExpression] = []
    while True:
        if pos >= len(tokens):
            raise MinimSyntaxError("could not find closing )")
        if tokens[pos] == ")":
            # skip the `)`
            return List(items), pos + 1
        expr, pos = _parse_at(tokens, pos)
        items.append(expr)


def parse(tokens: Sequence[str]) -> tuple[SExpression, list[str]]:
    """Parse one expression from the front of `tokens`.

    Returns the expression and the remaining, unconsumed tokens.
    Raises MinimSyntaxError on empty or unbalanced input.
    """
    expr, pos = _parse_at(tokens, 0)
    return expr, list(tokens[pos:])


def read(source: str) -> SExpression:
    """Tokenize and parse the first form in `source`; trailing tokens are dropped."""
    expr, _ = parse(tokenize(source))
    return expr
