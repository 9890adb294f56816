"""Registry of special forms for the mlisp evaluator.

Maps Keywords to handler functions that implement non-standard evaluation
rules. Every handler takes (tail, env, evaluate_fn) and returns a value.
`if` is not listed: the reader emits it as its own node kind and the
evaluator handles it in tail position via if_form.
"""

from mlisp.types.symbol import Keyword
from mlisp.evaluation.special_forms.define_form import define_form
from mlisp.evaluation.special_forms.lambda_form import lambda_form
from mlisp.evaluation.special_forms.list_form import list_form
from mlisp.evaluation.special_forms.print_form import print_form
from mlisp.evaluation.special_forms.combinator_forms import map_form, filter_form, reduce_form

SPECIAL_FORMS = {
    Keyword("define"): define_form,
    Keyword("list"): list_form,
    Keyword("print"): print_form,
    Keyword("lambda"): lambda_form,
    Keyword("map"): map_form,
    Keyword("filter"): filter_form,
    Keyword("reduce"): reduce_form,
}
