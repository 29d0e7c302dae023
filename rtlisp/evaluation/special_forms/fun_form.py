from rtlisp import AnalyzerFn, Node, SExpression
from rtlisp.errors import RtlArityError, RtlInvalidSymbol
from rtlisp.evaluation.special_forms.begin_form import analyze_sequence
from rtlisp.types.closure import Closure
from rtlisp.types.environment import Environment
from rtlisp.types.symbol import Symbol

FUN = Symbol("fun")


def fun_form(tail: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    # (fun (params) body...) allows zero or more body forms; several forms
    # run as an implicit begin, none at all yields the empty list.
    if not tail:
        raise RtlArityError("fun requires at least a parameter list")

    params = tail[0]
    if not isinstance(params, list):
        raise RtlInvalidSymbol(f"fun parameters must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise RtlInvalidSymbol(f"fun parameter must be a Symbol, got {p}")
    if len(set(params)) != len(params):
        raise RtlInvalidSymbol(f"fun parameters must be distinct: {params}")

    body_forms = tail[1:]
    body = analyze_sequence(body_forms, analyze_fn)

    def execute(env: Environment) -> Closure:
        return Closure(params, body, env, body_forms)

    return execute
