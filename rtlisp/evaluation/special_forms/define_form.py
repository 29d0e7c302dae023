from rtlisp import AnalyzerFn, LispValue, Node, SExpression
from rtlisp.errors import RtlArityError, RtlInvalidSymbol
from rtlisp.types.environment import Environment
from rtlisp.types.symbol import Symbol


def define_form(tail: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    """
    (def name value)
    Binds name in the innermost frame of the executing environment,
    replacing any earlier binding in that same frame.
    """
    if len(tail) != 2:
        raise RtlArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise RtlInvalidSymbol(f"def first argument must be a Symbol, got {name}")
    value = analyze_fn(val_expr)

    def execute(env: Environment) -> LispValue:
        return env.define(name, value(env))

    return execute
