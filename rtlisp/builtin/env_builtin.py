"""Built-in primitives for the rtlisp runtime environment.

This module defines arithmetic, comparison and list primitives, the immutable
name -> primitive table, and the helpers that seed it into a fresh base
environment beneath a global environment.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from rtlisp import LispValue
from rtlisp.errors import RtlArityError, RtlTypeError
from rtlisp.types.environment import EMPTY_ENV, Environment
from rtlisp.types.symbol import Symbol


def _check_numbers(name: str, expr: list[LispValue]) -> None:
    for x in expr:
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            raise RtlTypeError(f"All arguments to {name} must be numbers, got {x!r}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; errors if any arg is non-numeric."""
    _check_numbers("+", expr)
    return sum(expr)


def sub(expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise RtlArityError("- requires at least 1 argument")
    _check_numbers("-", expr)
    if len(expr) == 1:
        return -expr[0]
    result = expr[0]
    for x in expr[1:]:
        result -= x
    return result


def mul(expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments; errors if any arg is non-numeric."""
    _check_numbers("*", expr)
    result = 1
    for x in expr:
        result *= x
    return result


def div(expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns reciprocal; checks arity and zero division."""
    if not expr:
        raise RtlArityError("/ requires at least 1 argument")
    _check_numbers("/", expr)
    try:
        if len(expr) == 1:
            return 1 / expr[0]
        result = expr[0]
        for x in expr[1:]:
            result /= x
        return result
    except ZeroDivisionError:
        raise ZeroDivisionError("Division by zero")


# -------------------------------
# Comparison
# -------------------------------
def lt(expr: list[LispValue]) -> bool:
    """Chainable less-than: #t if a0 < a1 < a2 ... holds for all pairs."""
    _check_numbers("<", expr)
    return all(a < b for a, b in zip(expr, expr[1:]))


def gt(expr: list[LispValue]) -> bool:
    """Chainable greater-than: #t if a0 > a1 > a2 ... holds for all pairs."""
    _check_numbers(">", expr)
    return all(a > b for a, b in zip(expr, expr[1:]))


def equals(expr: list[LispValue]) -> bool:
    """#t if all arguments are equal (or zero/one arg), else #f."""
    if len(expr) <= 1:
        return True
    first = expr[0]
    return all(is_equal(first, other) for other in expr[1:])


def is_equal(a, b) -> bool:
    """Deep equality; booleans only equal booleans, numbers compare numerically."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


# -------------------------------
# Lists
# -------------------------------
def null(expr: list[LispValue]) -> bool:
    """Predicate: #t if the single argument is the empty list, else #f."""
    if len(expr) != 1:
        raise RtlArityError("null? requires exactly 1 argument")
    x = expr[0]
    return isinstance(x, list) and not x


def cons(expr: list[LispValue]) -> list[LispValue]:
    """Construct a new list by prepending head to tail (non-destructive)."""
    if len(expr) != 2:
        raise RtlArityError("cons requires exactly 2 arguments")
    head, tail = expr
    if not isinstance(tail, list):
        raise RtlTypeError(f"cons expects a list as its second argument, got {tail!r}")
    return [head] + tail


def car(expr: list[LispValue]) -> LispValue:
    """Return the first element of a non-empty list."""
    if len(expr) != 1:
        raise RtlArityError("car requires exactly 1 argument")
    xs = expr[0]
    if not isinstance(xs, list) or not xs:
        raise RtlTypeError(f"car expects a non-empty list, got {xs!r}")
    return xs[0]


def cdr(expr: list[LispValue]) -> list[LispValue]:
    """Return all but the first element of a non-empty list."""
    if len(expr) != 1:
        raise RtlArityError("cdr requires exactly 1 argument")
    xs = expr[0]
    if not isinstance(xs, list) or not xs:
        raise RtlTypeError(f"cdr expects a non-empty list, got {xs!r}")
    return xs[1:]


def list_builtin(expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments (identity)."""
    return list(expr)


PRIMITIVES: Mapping[Symbol, LispValue] = MappingProxyType(
    {
        Symbol("+"): add,
        Symbol("-"): sub,
        Symbol("*"): mul,
        Symbol("/"): div,
        Symbol("<"): lt,
        Symbol(">"): gt,
        Symbol("="): equals,
        Symbol("null?"): null,
        Symbol("cons"): cons,
        Symbol("car"): car,
        Symbol("cdr"): cdr,
        Symbol("list"): list_builtin,
    }
)

CONSTANTS: Mapping[Symbol, LispValue] = MappingProxyType(
    {
        Symbol("#t"): True,
        Symbol("#f"): False,
    }
)


def register(env: Environment) -> None:
    """Register all primitives and constants into the given environment."""
    env.update(dict(PRIMITIVES))
    env.update(dict(CONSTANTS))
    # nil gets a fresh empty list per environment
    env.define(Symbol("nil"), [])


def base_environment() -> Environment:
    """A new frame of primitives directly above the empty environment."""
    env = Environment(enclosure=EMPTY_ENV)
    register(env)
    return env


def global_environment() -> Environment:
    """A new, empty user frame enclosed by a fresh base environment."""
    return Environment(enclosure=base_environment())
