from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispArityError, MLispMalformedForm
from mlisp.types.environment import Environment
from mlisp.types.lambda_fn import Lambda
from mlisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) (body...)): exactly one parameter list and one body
    # form. The body is not evaluated; `env` becomes the closure environment.
    if len(tail) != 2:
        raise MLispArityError("lambda", 2, len(tail))

    params, body = tail
    if not isinstance(params, list):
        raise MLispMalformedForm("lambda", f"parameter list expected, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise MLispMalformedForm("lambda", f"parameter must be a symbol, got {p!r}")
    if not isinstance(body, list):
        raise MLispMalformedForm("lambda", f"body must be a list, got {body!r}")

    return Lambda(list(params), body, env)
