"""Runtime environment for mlisp.

An Environment is one scope frame: a mapping of Symbols to evaluated values
plus a fixed link to its parent frame. Lookups walk outward to the root;
writes always land in the local frame, shadowing outer bindings without
touching them. Frames are shared freely between closures and child frames
and live as long as anything still references them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from mlisp import LispValue
from mlisp.errors import MLispMalformedForm, MLispUnboundSymbol
from mlisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def extend(cls, parent: Environment) -> Environment:
        """Return a new, empty frame whose parent is `parent`."""
        return cls(outer=parent)

    def set(self, name: Symbol, value: LispValue) -> None:
        """Insert or overwrite `name` in this frame only."""
        self.vars[name] = value

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises MLispMalformedForm if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MLispMalformedForm("define", f"cannot bind {name!r}, expected a symbol")
        self.set(name, value)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> Optional[LispValue]:
        """Return the value bound to `name`, or None if it is unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises MLispUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise MLispUnboundSymbol(name)
        return env.vars[name]

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
