"""Registry of special forms for the rtlisp analyzer.

Maps Symbols to handler functions that analyze a form's operands once and
return the node that executes it. The analyzer consults this table before
treating a list as a function application.
"""

from rtlisp.types.symbol import Symbol
from rtlisp.evaluation.special_forms.quote_form import quote_form
from rtlisp.evaluation.special_forms.if_form import if_form
from rtlisp.evaluation.special_forms.logic_forms import and_form, or_form
from rtlisp.evaluation.special_forms.define_form import define_form
from rtlisp.evaluation.special_forms.set_form import set_form
from rtlisp.evaluation.special_forms.fun_form import fun_form
from rtlisp.evaluation.special_forms.begin_form import begin_form
from rtlisp.evaluation.special_forms.delay_form import delay_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("def"): define_form,
    Symbol("set!"): set_form,
    Symbol("fun"): fun_form,
    Symbol("begin"): begin_form,
    Symbol("delay"): delay_form,
}
