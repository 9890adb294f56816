from __future__ import annotations

import logging
import sys

from mlisp import LispValue
from mlisp.errors import MLispRecursionDepth
from mlisp.evaluation.evaluator import evaluate
from mlisp.reader.parser import parse
from mlisp.types.environment import Environment

logger = logging.getLogger(__name__)


def eval_source(source: str, env: Environment) -> LispValue:
    """Parse `source` (exactly one root form) and evaluate it in `env`."""
    try:
        form = parse(source)
        logger.debug("Evaluating %s", form)
        return evaluate(form, env)
    except RecursionError:
        # Deep nesting or non-tail recursion; the stack has unwound, env is intact
        raise MLispRecursionDepth(sys.getrecursionlimit()) from None


class Interpreter:
    """
    A session-scoped interpreter for mlisp programs.
    Keeps one root environment alive so definitions persist across calls.
    """
    def __init__(self, prelude: str | None = None):
        self.env = Environment()
        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate one program against the session environment."""
        return eval_source(code, self.env)
