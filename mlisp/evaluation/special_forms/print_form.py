from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.printer import to_display
from mlisp.runtime_context import get_output
from mlisp.types.environment import Environment
from mlisp.types.void import Void


def print_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Print space-separated renderings of the operands followed by newline; returns Void."""
    # All operands are evaluated before anything is written.
    values = [evaluate_fn(e, env) for e in tail]
    out = get_output()
    out.write(" ".join(to_display(v) for v in values))
    out.write("\n")
    return Void
