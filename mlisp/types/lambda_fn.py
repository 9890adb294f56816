"""Lambda value representation for mlisp."""

from __future__ import annotations

from io import StringIO

from mlisp import SExpression
from mlisp.printer import to_string
from mlisp.types.environment import Environment
from mlisp.types.symbol import Symbol


class Lambda:
    """A first-class lambda with parameters, body form, and closure env.

    The environment is the one active where the `lambda` form was evaluated;
    every call binds its arguments in a fresh child of it.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and self.body == other.body
            and self.env is other.env
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
