from __future__ import annotations


class VoidType:
    """Absence of a value: the result of define and print, and of `nil`."""

    __slots__ = ()

    def __repr__(self):
        return "nil"

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()
