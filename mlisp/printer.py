"""Textual rendering of mlisp values and forms.

`to_string` is the rendering used by the REPL and inside error messages:
strings are quoted so they read back as literals. `to_display` is what
`print` writes: the same, except strings appear as their raw text.
"""

from __future__ import annotations

from mlisp import LispValue
from mlisp.types.list_data import ListData
from mlisp.types.void import VoidType


def _render(x: LispValue, quote_strings: bool) -> str:
    if isinstance(x, bool):
        return "true" if x else "false"
    if isinstance(x, str):
        return f'"{x}"' if quote_strings else x
    if isinstance(x, VoidType):
        return "nil"
    if isinstance(x, (list, ListData)):
        return "(" + " ".join(_render(e, quote_strings) for e in x) + ")"
    # int, float, Symbol, Keyword, Operator, If, Lambda
    return str(x)


def to_string(x: LispValue) -> str:
    return _render(x, quote_strings=True)


def to_display(x: LispValue) -> str:
    return _render(x, quote_strings=False)
