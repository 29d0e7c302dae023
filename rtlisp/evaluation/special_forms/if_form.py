from rtlisp import AnalyzerFn, LispValue, Node, SExpression
from rtlisp.errors import RtlArityError
from rtlisp.types.environment import Environment


def is_true(value: LispValue) -> bool:
    # Only the false literal is falsy: 0, () and nil all count as true
    return value is not False


def if_form(tail: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    if len(tail) not in (2, 3):
        raise RtlArityError("if requires a condition, a then-expression and an optional else-expression")

    test = analyze_fn(tail[0])
    then = analyze_fn(tail[1])
    othw = analyze_fn(tail[2]) if len(tail) == 3 else None

    def execute(env: Environment) -> LispValue:
        if is_true(test(env)):
            return then(env)
        if othw is None:
            return False
        return othw(env)

    return execute
