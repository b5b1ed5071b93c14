from minim.types.symbol import Symbol
from minim.types.expression import (
    Boolean,
    Builtin,
    Closure,
    Expression,
    List,
    Number,
)
from minim.types.environment import Environment

__all__ = [
    "Boolean",
    "Builtin",
    "Closure",
    "Environment",
    "Expression",
    "List",
    "Number",
    "Symbol",
]
