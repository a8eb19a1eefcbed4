"""Registry of special forms for the Bebop evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Handlers receive the unevaluated operands, the exact
environment of the current evaluation, and the evaluator itself.
"""

from bebop.types.symbol import Symbol
from bebop.evaluation.special_forms.define_form import define_form, local_define_form
from bebop.evaluation.special_forms.lambda_form import lambda_form
from bebop.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("def"): define_form,
    Symbol("="): local_define_form,
    Symbol("\\"): lambda_form,
    Symbol("if"): if_form,
}
