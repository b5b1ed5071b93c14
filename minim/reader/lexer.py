"""Lexer: splits raw source text into atomic tokens.

Parentheses are padded with spaces and the result is split on whitespace, so
`(+ 1 2)` becomes `["(", "+", "1", "2", ")"]`. There are no string literals,
escapes or comments; every other character run is an atom.
"""

from __future__ import annotations


def tokenize(source: str) -> list[str]:
    """Token list for `source`; empty input yields an empty list."""
    return source.replace("(", " ( ").replace(")", " ) ").split()
