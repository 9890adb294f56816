"""Evaluated list values.

ListData is what `list`, `map`, `filter` and `reduce` produce. It is kept
apart from plain Python lists (which are forms, or the result of an implicit
sequence) so evaluated data is never re-interpreted as code.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from mlisp import LispValue


class ListData:
    __slots__ = ("items",)

    def __init__(self, items: Iterable[LispValue] = ()):
        self.items: list[LispValue] = list(items)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> LispValue:
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListData) and self.items == other.items

    __hash__ = None  # mutable container

    def __repr__(self) -> str:
        return f"ListData({self.items!r})"
