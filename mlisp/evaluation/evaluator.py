"""Core evaluator and trampoline for the mlisp interpreter.

`evaluate` is a loop over a mutable (form, env) pair. The two tail positions
of the language, the chosen branch of `if` and the body of a lambda applied
by name, do not recurse: their handlers return a TailCall and the loop
carries on with its form and environment. A tail-recursive function therefore
runs in constant Python stack depth. Argument evaluation, operator operands,
special-form operands and combinator bodies are ordinary recursive calls.
"""

from __future__ import annotations

from mlisp import SExpression, LispValue
from mlisp.errors import MLispMalformedForm
from mlisp.evaluation.apply import apply_named
from mlisp.evaluation.operators import binary_op_form
from mlisp.evaluation.special_forms import SPECIAL_FORMS
from mlisp.evaluation.special_forms.if_form import if_form
from mlisp.types.environment import Environment
from mlisp.types.symbol import FALSE, NIL, TRUE, IfType, Keyword, Operator, Symbol
from mlisp.types.void import Void, VoidType


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value.

    Raises an MLispError subclass on the first failure.
    """
    while True:
        match expr:
            case [IfType(), *tail]:
                step = if_form(tail, env, evaluate)
            case [Operator() as op, *tail]:
                return binary_op_form(op, tail, env, evaluate)
            case [Keyword() as keyword, *tail]:
                return SPECIAL_FORMS[keyword](tail, env, evaluate)
            case [Symbol() as head, *tail]:
                step = apply_named(head, tail, env, evaluate)
            case list():
                return evaluate_sequence(expr, env)
            case Symbol():
                return resolve_symbol(expr, env)
            case Keyword() | Operator() | IfType():
                raise MLispMalformedForm(str(expr), "reserved word used outside head position")
            case _:
                # Atoms, lambdas, ListData and Void evaluate to themselves.
                return expr

        # Tail position: continue with the selected form instead of recursing.
        expr, env = step.form, step.env


def evaluate_sequence(forms: list[SExpression], env: Environment) -> list[LispValue]:
    """Evaluate each form in order in the same env; keep the non-Void results.

    This is how a whole program, a parenthesized list of defines followed by
    expressions, evaluates: the defines yield Void and drop out.
    """
    results = []
    for form in forms:
        value = evaluate(form, env)
        if not isinstance(value, VoidType):
            results.append(value)
    return results


def resolve_symbol(symbol: Symbol, env: Environment) -> LispValue:
    """Resolve `true`, `false` and `nil` first, then look the symbol up."""
    if symbol == TRUE:
        return True
    if symbol == FALSE:
        return False
    if symbol == NIL:
        return Void
    return env.lookup(symbol)
