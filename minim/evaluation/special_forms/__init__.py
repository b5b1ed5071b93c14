"""Registry of special forms for the minim evaluator.

Maps head Symbols to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before looking the head up in the
environment, so a user binding named `if` never shadows the special form.
"""

from minim.types.symbol import Symbol
from minim.evaluation.special_forms.if_form import if_form
from minim.evaluation.special_forms.define_form import define_form
from minim.evaluation.special_forms.fn_form import fn_form
from minim.evaluation.special_forms.exit_form import exit_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("def"): define_form,
    Symbol("fn"): fn_form,
    Symbol("exit"): exit_form,
}
