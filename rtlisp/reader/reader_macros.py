from __future__ import annotations

from typing import Callable

from rtlisp import SExpression
from rtlisp.reader.tokenizer import QUOTE, REVERSE
from rtlisp.types.symbol import Symbol

ReaderTransformer = Callable[[SExpression], SExpression]

QUOTE_SYMBOL = Symbol("quote")


def deep_reverse(expr: SExpression) -> SExpression:
    """Reverse a list's element order and, recursively, every nested list's.

    Atoms are returned unchanged. A new list is built; `expr` is not mutated.
    """
    if not isinstance(expr, list):
        return expr
    return [deep_reverse(item) for item in reversed(expr)]


def make_quote(expr: SExpression) -> SExpression:
    return [QUOTE_SYMBOL, expr]


class ReaderMacros:
    """
    Registry of reader macros.
    Maps a marker token kind to a transformer that rewrites the single
    expression read immediately after the marker.
    """

    def __init__(self):
        self.macros: dict[str, ReaderTransformer] = {}

    def define(self, kind: str, fn: ReaderTransformer) -> None:
        """Register a reader macro for a given marker token kind."""
        self.macros[kind] = fn

    def is_macro(self, kind: str) -> bool:
        return kind in self.macros

    def dispatch(self, kind: str, expr: SExpression) -> SExpression:
        if kind not in self.macros:
            raise ValueError(f"No reader macro defined for {kind!r}")
        return self.macros[kind](expr)


# -------------------------
# Single global instance
# -------------------------
reader_macros: ReaderMacros = ReaderMacros()

# $expr => expr deep-reversed
reader_macros.define(REVERSE, deep_reverse)

# 'expr => (quote expr)
reader_macros.define(QUOTE, make_quote)
