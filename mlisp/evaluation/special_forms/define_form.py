from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispArityError, MLispMalformedForm
from mlisp.types.environment import Environment
from mlisp.types.symbol import Symbol
from mlisp.types.void import Void


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame, so a lambda defined here can see its own name.
    """
    if len(tail) != 2:
        raise MLispArityError("define", 2, len(tail))

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MLispMalformedForm("define", f"name must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Void
