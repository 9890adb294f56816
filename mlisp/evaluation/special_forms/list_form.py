from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.types.environment import Environment
from mlisp.types.list_data import ListData


def list_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(list a b ...) -> ListData of the evaluated operands."""
    return ListData(evaluate_fn(e, env) for e in tail)
