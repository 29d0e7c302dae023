"""Application engine for rtlisp.

Closures are applied by extending their captured environment with one fresh
frame of parameter bindings and running the analyzed body there. Primitives
bypass that machinery and are called directly with the evaluated arguments.
"""

from typing import Callable

from rtlisp import LispValue
from rtlisp.errors import RtlArityError, RtlTypeError
from rtlisp.types.closure import Closure
from rtlisp.types.environment import extend_environment


def apply_closure(fn: Closure, args: list[LispValue]) -> LispValue:
    """Run `fn`'s body in a new frame binding its parameters to `args`.

    Raises RtlArityError if the argument count does not match.
    """
    if len(args) != fn.arity:
        raise RtlArityError(
            f"{fn} expects {fn.arity} argument(s), got {len(args)}"
        )
    new_env = extend_environment(fn.params, args, fn.env)
    return fn.body(new_env)


def apply_primitive(fn: Callable[[list[LispValue]], LispValue], args: list[LispValue]) -> LispValue:
    return fn(args)


def apply(head: Closure | Callable[[list[LispValue]], LispValue] | object, args: list[LispValue]) -> LispValue:
    """Apply either a Closure or a primitive.

    - For a Closure, defer to apply_closure.
    - For Python callables (primitives), invoke with the list of args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args)
    elif callable(head):
        return apply_primitive(head, args)
    else:
        raise RtlTypeError(f"Cannot apply non-function {head!r}")
