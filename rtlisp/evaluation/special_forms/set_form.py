from rtlisp import AnalyzerFn, LispValue, Node, SExpression
from rtlisp.errors import RtlArityError, RtlInvalidSymbol
from rtlisp.types.environment import Environment
from rtlisp.types.symbol import Symbol


def set_form(tail: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    if len(tail) != 2:
        raise RtlArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise RtlInvalidSymbol(f"set! first argument must be a Symbol, got {var_sym}")
    value = analyze_fn(val_expr)

    def execute(env: Environment) -> LispValue:
        return env.assign(var_sym, value(env))

    return execute
