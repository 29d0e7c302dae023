from rtlisp import AnalyzerFn, LispValue, Node, SExpression
from rtlisp.types.environment import Environment


def analyze_sequence(exprs: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    """Analyze each expression once; run them in order, keeping the last result."""
    nodes = [analyze_fn(e) for e in exprs]

    if not nodes:
        def execute_empty(env: Environment) -> LispValue:
            return []
        return execute_empty

    if len(nodes) == 1:
        return nodes[0]

    *effects, last = nodes

    def execute(env: Environment) -> LispValue:
        for node in effects:
            node(env)
        return last(env)

    return execute


def begin_form(tail: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    return analyze_sequence(tail, analyze_fn)
