"""Analyzer and evaluator for rtlisp.

`analyze` walks an expression once and returns a node: a Python closure that
takes an Environment and produces a value. Dispatch on the shape of the
expression (special forms, variables, applications) happens here, at analysis
time, so that running the node many times never re-inspects the expression.
`evaluate` is analysis followed by one execution.
"""

from __future__ import annotations

import logging

from rtlisp import LispValue, Node, SExpression
from rtlisp.errors import RtlSyntaxError
from rtlisp.evaluation.apply import apply
from rtlisp.evaluation.special_forms import SPECIAL_FORMS
from rtlisp.types.closure import Closure
from rtlisp.types.environment import Environment
from rtlisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def analyze(expr: SExpression) -> Node:
    """Compile `expr` into a node, Environment -> LispValue."""
    match expr:
        case int() | float() | Closure():
            # numbers, #t/#f (bool subclasses int), and closures built by host code
            def execute_literal(env: Environment) -> LispValue:
                return expr
            return execute_literal

        case Symbol():
            # Resolved per execution, so the same node works in any env
            def execute_lookup(env: Environment) -> LispValue:
                return env.lookup(expr)
            return execute_lookup

        case []:
            def execute_empty(env: Environment) -> LispValue:
                return []
            return execute_empty

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, analyze)

        case [operator, *operands]:
            return analyze_application(operator, operands)

        case _ if callable(expr):
            def execute_primitive(env: Environment) -> LispValue:
                return expr
            return execute_primitive

    raise RtlSyntaxError(f"Cannot analyze expression {expr!r}")


def analyze_application(operator: SExpression, operands: list[SExpression]) -> Node:
    an_func = analyze(operator)
    an_args = [analyze(arg) for arg in operands]

    def execute_application(env: Environment) -> LispValue:
        func = an_func(env)
        args = [arg(env) for arg in an_args]
        return apply(func, args)

    return execute_application


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Analyze `expr` and execute it once against `env`."""
    logger.debug("evaluate %r", expr)
    return analyze(expr)(env)
