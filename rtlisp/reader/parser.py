"""
  rtlisp Reader

- Emits Python primitives instead of Cons cells:

    - numbers -> int/float (a literal is a number iff it parses as one)
    - symbols -> Symbol
    - lists -> Python list
    - 'expr -> [Symbol("quote"), expr]
    - $expr -> expr deep-reversed

- Lists are assembled by sublist extraction: the matching closer of an
  opener is located by counting brackets, regardless of bracket family,
  and the tokens in between are read recursively.
"""

from __future__ import annotations

import math
from typing import Iterator, Optional

from rtlisp import SExpression
from rtlisp.errors import RtlSyntaxError
from rtlisp.reader.reader_macros import reader_macros
from rtlisp.reader.tokenizer import CLOSE, LITERAL, OPEN, Token, tokenize
from rtlisp.types.symbol import Symbol


def make_atom(text: str) -> SExpression:
    """Numeric if `text` parses as a (non-NaN) number, otherwise a Symbol."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return Symbol(text)
    if math.isnan(value):
        return Symbol(text)
    return value


def sublist_end(tokens: list[Token], start: int) -> int:
    """Index of the closer matching the opener at `tokens[start]`.

    Any closer decrements the count, whatever family its opener was.
    """
    depth = 1
    i = start + 1
    n = len(tokens)
    while i < n:
        kind = tokens[i][0]
        if kind == OPEN:
            depth += 1
        elif kind == CLOSE:
            depth -= 1
            if depth == 0:
                return i
        i += 1
    raise RtlSyntaxError("Unterminated list: missing closing bracket")


class TokenStream:
    def __init__(self, tokens: list[Token]):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if self.pos >= len(self.tokens):
            return None, None
        return self.tokens[self.pos]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        tok = self.peek()
        if tok[0] is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise RtlSyntaxError("Unexpected end of input")

        # ------------------------
        # Dispatch reader macros first
        # ------------------------
        if reader_macros.is_macro(tok_type):
            self.advance()  # consume the marker
            if self.at_end():
                raise RtlSyntaxError(f"Reader macro {tok_val!r} has nothing to read")
            return reader_macros.dispatch(tok_type, self.parse_expr())

        if tok_type == LITERAL:
            self.advance()
            return make_atom(tok_val)

        if tok_type == OPEN:
            end = sublist_end(self.tokens, self.pos)
            inner = TokenStream(self.tokens[self.pos + 1:end])
            self.pos = end + 1
            return list(inner.parse_all())

        if tok_type == CLOSE:
            raise RtlSyntaxError("Unexpected closing bracket")

        raise RtlSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(tokenize(source)).parse_all())


def read_one(source: str) -> SExpression:
    """Read exactly one expression; anything else is a syntax error."""
    exprs = read(source)
    if len(exprs) != 1:
        raise RtlSyntaxError(f"Expected exactly one expression, got {len(exprs)}")
    return exprs[0]
