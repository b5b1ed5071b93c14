from __future__ import annotations


class MinimError(Exception):
    """ Base class for all minim language errors.

    Every error carries a single human-readable reason; the subclasses only
    classify it for Python callers.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason: str = reason


class MinimSyntaxError(MinimError):
    """ Raised when the token stream cannot be parsed into an expression"""


class MinimUnboundSymbol(MinimError):
    """ Raised when a symbol is evaluated before it is bound"""


class MinimArityError(MinimError):
    """ Raised when a form or function receives the wrong number of arguments"""


class MinimTypeError(MinimError):
    """ Raised when a value has the wrong variant for the operation"""


class MinimRecursionError(MinimError):
    """ Raised when evaluation exhausts the host call stack"""


class ExitRequest(Exception):
    """Control signal raised by the `exit` special form.

    Not a MinimError: `except MinimError` never intercepts session termination.
    """

    def __init__(self, status: int = 0):
        super().__init__(f"ExitRequest(status={status})")
        self.status: int = status
