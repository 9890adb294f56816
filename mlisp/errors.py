"""Error hierarchy for mlisp.

Every failure raised by the reader or the evaluator derives from MLispError.
Each subclass keeps the offending name/form/operands as attributes and builds
its own message, so callers can inspect errors without parsing text.
"""

from __future__ import annotations

from typing import Any, Sequence


def _render(value: Any) -> str:
    # Imported lazily: the printer depends on the type modules, which import us.
    from mlisp.printer import to_string
    return to_string(value)


class MLispError(Exception):
    """ Base class for all mlisp errors"""
    pass


class MLispUnboundSymbol(MLispError):
    """ Raised when a symbol is evaluated before it is bound"""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Unbound symbol: {name}")


class MLispUnboundFunction(MLispError):
    """ Raised when the head of an application has no binding"""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Unbound function: {name}")


class MLispNotCallable(MLispError):
    """ Raised when the head of an application is bound to a non-lambda"""

    def __init__(self, name: Any, value: Any):
        self.name = name
        self.value = value
        super().__init__(f"Not a lambda: {name} is bound to {_render(value)}")


class MLispArityError(MLispError):
    """ Raised when a form or lambda receives the wrong number of operands"""

    def __init__(self, form: str, expected: int | str, got: int):
        self.form = form
        self.expected = expected
        self.got = got
        super().__init__(f"Invalid number of arguments for {form}: expected {expected}, got {got}")


class MLispTypeError(MLispError):
    """ Raised when operand types do not fit an operator, combinator or if"""

    def __init__(self, form: str, operands: Sequence[Any]):
        self.form = form
        self.operands = tuple(operands)
        rendered = " ".join(_render(o) for o in self.operands)
        super().__init__(f"Invalid types for {form}: {rendered}")


class MLispMalformedForm(MLispError):
    """ Raised when a form is structurally invalid (e.g. define of a non-symbol)"""

    def __init__(self, form: str, reason: str):
        self.form = form
        self.reason = reason
        super().__init__(f"Invalid {form}: {reason}")


class MLispSyntaxError(MLispError):
    """ Raised by the lexer and parser"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class MLispDivisionByZero(MLispError):
    """ Raised for integer division or modulo by zero"""

    def __init__(self, operator: str, left: Any):
        self.operator = operator
        self.left = left
        super().__init__(f"Division by zero: ({operator} {_render(left)} 0)")


class MLispRecursionDepth(MLispError):
    """ Raised when non-tail recursion exhausts the Python call stack"""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Maximum recursion depth exceeded (limit {limit})")
