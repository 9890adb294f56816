"""Type-directed semantics of the binary operators.

Both operands are always evaluated, left first; `&` and `|` do not
short-circuit. int with int stays int (with truncating `/` and `%`), any
int/float mix is promoted to float, strings support `+ < > = !=`, booleans
support `& |`. Every other combination is an MLispTypeError naming the
operator and both operands.
"""

from __future__ import annotations

import math
from typing import Callable

from mlisp import EvaluatorFn, LispValue, SExpression
from mlisp.errors import MLispArityError, MLispDivisionByZero, MLispTypeError
from mlisp.types.environment import Environment
from mlisp.types.symbol import Operator

NUMBERS = (int, float)


class _Unsupported(Exception):
    """Operand types have no case for this operator."""


def _numeric_pair(left: LispValue, right: LispValue) -> tuple[int, int] | tuple[float, float]:
    lt, rt = type(left), type(right)
    if lt is int and rt is int:
        return left, right
    if lt in NUMBERS and rt in NUMBERS:
        try:
            return float(left), float(right)
        except OverflowError:
            # int operand beyond the float range
            raise _Unsupported from None
    raise _Unsupported


def _same_type(left: LispValue, right: LispValue, *types: type) -> bool:
    return type(left) is type(right) and type(left) in types


def _trunc_div(l: int, r: int) -> int:
    q = abs(l) // abs(r)
    return q if (l < 0) == (r < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(left: LispValue, right: LispValue) -> LispValue:
    if _same_type(left, right, str):
        return left + right
    l, r = _numeric_pair(left, right)
    return l + r


def sub(left: LispValue, right: LispValue) -> LispValue:
    l, r = _numeric_pair(left, right)
    return l - r


def mul(left: LispValue, right: LispValue) -> LispValue:
    l, r = _numeric_pair(left, right)
    return l * r


def div(left: LispValue, right: LispValue) -> LispValue:
    l, r = _numeric_pair(left, right)
    if type(l) is int:
        if r == 0:
            raise MLispDivisionByZero("/", left)
        return _trunc_div(l, r)
    if r == 0.0:
        # IEEE 754: x/0 is a signed infinity, 0/0 and nan/0 are nan
        if l == 0.0 or math.isnan(l):
            return math.nan
        return math.copysign(math.inf, l) * math.copysign(1.0, r)
    return l / r


def mod(left: LispValue, right: LispValue) -> LispValue:
    l, r = _numeric_pair(left, right)
    if type(l) is int:
        if r == 0:
            raise MLispDivisionByZero("%", left)
        # Remainder takes the sign of the dividend
        return l - r * _trunc_div(l, r)
    if r == 0.0 or math.isinf(l) or math.isnan(l) or math.isnan(r):
        return math.nan
    return math.fmod(l, r)


# -------------------------------
# Comparison
# -------------------------------
def lt(left: LispValue, right: LispValue) -> bool:
    if _same_type(left, right, str):
        return left < right
    l, r = _numeric_pair(left, right)
    return l < r


def gt(left: LispValue, right: LispValue) -> bool:
    if _same_type(left, right, str):
        return left > right
    l, r = _numeric_pair(left, right)
    return l > r


def eq(left: LispValue, right: LispValue) -> bool:
    # Deliberately no float case: (= 1.0 1.0) is a type error.
    if _same_type(left, right, int, str):
        return left == right
    raise _Unsupported


def ne(left: LispValue, right: LispValue) -> bool:
    if _same_type(left, right, str):
        return left != right
    l, r = _numeric_pair(left, right)
    return l != r


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(left: LispValue, right: LispValue) -> bool:
    if _same_type(left, right, bool):
        return left and right
    raise _Unsupported


def logical_or(left: LispValue, right: LispValue) -> bool:
    if _same_type(left, right, bool):
        return left or right
    raise _Unsupported


BINARY_OPERATORS: dict[str, Callable[[LispValue, LispValue], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "<": lt,
    ">": gt,
    "=": eq,
    "!=": ne,
    "&": logical_and,
    "|": logical_or,
}


def apply_operator(op: Operator, left: LispValue, right: LispValue) -> LispValue:
    """Apply `op` to two evaluated operands."""
    try:
        return BINARY_OPERATORS[op.id](left, right)
    except _Unsupported:
        raise MLispTypeError(f"{op} operator", (left, right)) from None


def binary_op_form(
    op: Operator,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(op left right)"""
    if len(tail) != 2:
        raise MLispArityError(f"{op} operator", 2, len(tail))
    left = evaluate_fn(tail[0], env)
    right = evaluate_fn(tail[1], env)
    return apply_operator(op, left, right)
