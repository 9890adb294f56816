"""Application engine for mlisp.

Centralizes how a Lambda is applied so the evaluator's trampoline and the
map/filter/reduce combinators share one binding rule:

- a fresh frame is created as a child of the lambda's *closure* environment,
  never of the caller's, which is what makes scoping lexical;
- parameters are bound positionally; too few arguments is an arity error,
  surplus arguments are ignored.
"""

from __future__ import annotations

from typing import Sequence

from mlisp import EvaluatorFn, LispValue, SExpression
from mlisp.errors import MLispArityError, MLispNotCallable, MLispUnboundFunction
from mlisp.types.environment import Environment
from mlisp.types.lambda_fn import Lambda
from mlisp.types.symbol import Symbol
from mlisp.types.tail_call import TailCall


def bind_arguments(fn: Lambda, args: Sequence[LispValue], form: str) -> Environment:
    """Return a child frame of `fn.env` with `args` bound to `fn.params`.

    `form` names the caller in the arity error raised for missing arguments.
    """
    if len(args) < fn.arity:
        raise MLispArityError(form, fn.arity, len(args))
    local_env = Environment.extend(fn.env)
    for param, value in zip(fn.params, args):
        local_env.set(param, value)
    return local_env


def call_lambda(fn: Lambda, args: Sequence[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply `fn` to already-evaluated `args`, outside of tail position."""
    return evaluate_fn(fn.body, bind_arguments(fn, args, str(fn)))


def apply_named(
    head: Symbol,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """Prepare the tail call for `(head arg...)`.

    Resolves `head`, evaluates only as many argument forms as the lambda has
    parameters, and returns the body paired with the new frame for the
    evaluator loop to continue with.
    """
    fn = env.get(head)
    if fn is None:
        raise MLispUnboundFunction(head)
    if not isinstance(fn, Lambda):
        raise MLispNotCallable(head, fn)
    if len(arg_forms) < fn.arity:
        raise MLispArityError(str(head), fn.arity, len(arg_forms))
    args = [evaluate_fn(arg, env) for arg in arg_forms[: fn.arity]]
    return TailCall(fn.body, bind_arguments(fn, args, str(head)))
