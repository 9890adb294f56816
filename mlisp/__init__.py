# Core type aliases for mlisp's data model.
# Plain Python types (int, float, bool, str, list) represent atoms and forms;
# Symbol, Keyword, Operator, If, Lambda, ListData and Void are small classes
# under mlisp.types.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Forms and values share one representation, so both aliases resolve to `Any`.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue)
SExpression = LispValue

# Evaluator function type handed to special forms: evaluate(form, env)
EvaluatorFn = Callable[..., LispValue]
