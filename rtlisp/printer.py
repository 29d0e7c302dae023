"""Render rtlisp values back to source text."""

from __future__ import annotations

from io import StringIO

from rtlisp import LispValue
from rtlisp.types.closure import Closure
from rtlisp.types.symbol import Symbol


def _write(value: LispValue, buffer: StringIO) -> None:
    if value is True:
        buffer.write("#t")
    elif value is False:
        buffer.write("#f")
    elif isinstance(value, float):
        if value.is_integer():
            buffer.write(str(int(value)))
        else:
            buffer.write(repr(value))
    elif isinstance(value, (int, Symbol)):
        buffer.write(str(value))
    elif isinstance(value, list):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    elif isinstance(value, Closure):
        buffer.write(str(value))
    elif callable(value):
        buffer.write(f"#<primitive {getattr(value, '__name__', '?')}>")
    else:
        buffer.write(repr(value))


def to_lisp(value: LispValue) -> str:
    """Lisp-style text for `value`, e.g. (quote (1 2)) or #t."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
