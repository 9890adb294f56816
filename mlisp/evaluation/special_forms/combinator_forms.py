"""Higher-order list combinators: map, filter, reduce.

Each is a special form rather than a function value. The lambda operand is
evaluated first, then the collection (and for reduce, the seed). Every
element is bound, already evaluated, into a fresh child of the lambda's
closure environment and the body is evaluated once per element. These body
evaluations recurse through the evaluator, so they do not share the
trampoline's constant-stack guarantee.
"""

from __future__ import annotations

from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispArityError, MLispTypeError
from mlisp.evaluation.apply import call_lambda
from mlisp.types.environment import Environment
from mlisp.types.lambda_fn import Lambda
from mlisp.types.list_data import ListData


def _lambda_operand(form: str, value: LispValue, arity: int) -> Lambda:
    if not isinstance(value, Lambda):
        raise MLispTypeError(f"{form} function", (value,))
    if value.arity != arity:
        raise MLispArityError(f"{form} lambda", arity, value.arity)
    return value


def _collection_operand(form: str, value: LispValue) -> ListData:
    if not isinstance(value, ListData):
        raise MLispTypeError(f"{form} collection", (value,))
    return value


def map_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(map fn coll) -> ListData of (fn item) for each item, in order."""
    if len(tail) != 2:
        raise MLispArityError("map", 2, len(tail))
    fn = _lambda_operand("map", evaluate_fn(tail[0], env), 1)
    coll = _collection_operand("map", evaluate_fn(tail[1], env))
    return ListData(call_lambda(fn, (item,), evaluate_fn) for item in coll)


def filter_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(filter fn coll) -> ListData of the items for which fn yields true.

    A non-boolean result excludes the item; it is not an error.
    """
    if len(tail) != 2:
        raise MLispArityError("filter", 2, len(tail))
    fn = _lambda_operand("filter", evaluate_fn(tail[0], env), 1)
    coll = _collection_operand("filter", evaluate_fn(tail[1], env))
    return ListData(item for item in coll if call_lambda(fn, (item,), evaluate_fn) is True)


def reduce_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(reduce fn init coll) -> left fold of coll with fn, seeded with init."""
    if len(tail) != 3:
        raise MLispArityError("reduce", 3, len(tail))
    fn = _lambda_operand("reduce", evaluate_fn(tail[0], env), 2)
    coll = _collection_operand("reduce", evaluate_fn(tail[2], env))
    acc = evaluate_fn(tail[1], env)
    for item in coll:
        acc = call_lambda(fn, (acc, item), evaluate_fn)
    return acc
