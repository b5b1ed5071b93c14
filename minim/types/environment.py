"""Runtime environment for minim.

An Environment is one frame of the lexical chain: a mapping of Symbols to
evaluated values plus an optional `outer` link. The root frame lives for the
whole session; frames created for a closure call are dropped when the call
returns, so the chain never forms a cycle.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from minim.types.errors import MinimTypeError
from minim.types.expression import LispValue
from minim.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        An existing binding in this frame is overwritten; a binding of the same
        name in an outer frame is shadowed, never mutated.
        """
        if not isinstance(name, Symbol):
            raise MinimTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Optional[LispValue]:
        """Return the value bound to `name` in the nearest frame, or None."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def chain(self) -> Iterable[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            for env in self.chain():
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    frames.append(env_buf.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
