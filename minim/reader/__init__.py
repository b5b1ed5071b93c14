from minim.reader.lexer import tokenize
from minim.reader.parser import parse, parse_atom, read

__all__ = ["tokenize", "parse", "parse_atom", "read"]
