"""Name-like nodes produced by the reader.

A Symbol is resolved against the environment. Keyword, Operator and If are
the reserved words of the language: the reader classifies them once, so the
evaluator matches on node type instead of comparing strings. The four classes
are siblings, never equal to each other even when they share a name.
"""

from __future__ import annotations

import sys


class Name:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self):
        return f"{type(self).__name__}({self.id!r})"

    def __str__(self):
        return self.id


class Symbol(Name):
    """A user name: variable or function."""
    __slots__ = ()


class Keyword(Name):
    """Head of a special form: define, list, print, lambda, map, filter, reduce."""
    __slots__ = ()


class Operator(Name):
    """One of the binary operators."""
    __slots__ = ()


class IfType:
    __slots__ = ()

    def __repr__(self):
        return "If"

    def __str__(self):
        return "if"


If = IfType()

KEYWORDS = frozenset({"define", "list", "print", "lambda", "map", "filter", "reduce"})
OPERATORS = frozenset({"+", "-", "*", "/", "%", "<", ">", "=", "!=", "&", "|"})

# Symbols resolved before the environment is consulted
TRUE = Symbol("true")
FALSE = Symbol("false")
NIL = Symbol("nil")
