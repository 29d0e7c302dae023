from rtlisp import AnalyzerFn, Node, SExpression
from rtlisp.types.symbol import Symbol

IF = Symbol("if")


def make_and(operands: list[SExpression]) -> SExpression:
    """(and) => #t; (and e rest...) => (if e (and rest...) #f)"""
    if not operands:
        return True
    return [IF, operands[0], make_and(operands[1:]), False]


def make_or(operands: list[SExpression]) -> SExpression:
    """(or) => #f; (or e rest...) => (if e #t (or rest...))"""
    if not operands:
        return False
    return [IF, operands[0], True, make_or(operands[1:])]


def and_form(tail: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    """Short-circuiting logical AND, rewritten into nested ifs before analysis.

    Operands are tested left to right; the first false one stops evaluation
    and the form yields #f. With every operand true (or none at all) it
    yields #t.
    """
    return analyze_fn(make_and(tail))


def or_form(tail: list[SExpression], analyze_fn: AnalyzerFn) -> Node:
    """Short-circuiting logical OR, rewritten into nested ifs before analysis.

    The first true operand stops evaluation and the form yields #t; if none
    is true (or there are none) it yields #f.
    """
    return analyze_fn(make_or(tail))
