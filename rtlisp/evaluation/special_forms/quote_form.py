from rtlisp import AnalyzerFn, Node, SExpression
from rtlisp.errors import RtlArityError
from rtlisp.types.environment import Environment


def quote_form(tail: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    if len(tail) != 1:
        raise RtlArityError("Quote expects exactly 1 argument")
    text = tail[0]

    def execute(env: Environment):
        return text

    return execute
