from rtlisp import AnalyzerFn, Node, SExpression
from rtlisp.errors import RtlArityError
from rtlisp.evaluation.special_forms.fun_form import FUN


def delay_form(tail: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    """(delay e) => (fun () e); calling the result forces e, every time."""
    if len(tail) != 1:
        raise RtlArityError("delay expects exactly 1 argument")
    return analyze_fn([FUN, [], tail[0]])
