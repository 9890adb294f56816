from mlisp import SExpression
from mlisp.types.environment import Environment


class TailCall:
    """Next (form, env) pair for the evaluator loop to continue with."""

    __slots__ = ("form", "env")

    def __init__(self, form: SExpression, env: Environment):
        self.form = form
        self.env = env
