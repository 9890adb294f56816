from mlisp import EvaluatorFn
from mlisp import SExpression
from mlisp.errors import MLispArityError, MLispTypeError
from mlisp.types.environment import Environment
from mlisp.types.tail_call import TailCall


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """(if cond then else): select the branch; the evaluator loop runs it."""
    if len(tail) != 3:
        raise MLispArityError("if", 3, len(tail))

    cond = evaluate_fn(tail[0], env)
    # Only real booleans; no Lisp truthiness.
    if not isinstance(cond, bool):
        raise MLispTypeError("if condition", (cond,))

    return TailCall(tail[1] if cond else tail[2], env)
