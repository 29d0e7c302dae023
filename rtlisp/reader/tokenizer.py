"""Tokenizer for rtlisp source text.

Every bracket, reversal marker (`$`) and quote marker (`'`) is a standalone
token; any other maximal run of non-whitespace characters is a literal.
The three bracket families are normalised so the reader only ever sees
`(` and `)`.
"""

from __future__ import annotations

import re
from typing import Iterator

Token = tuple[str, str]

OPEN = "open"
CLOSE = "close"
REVERSE = "reverse"
QUOTE = "quote"
LITERAL = "literal"

OPENERS = "([{"
CLOSERS = ")]}"

TOKEN_RE = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<open>[(\[{])"  # ( [ {
    r"|(?P<close>[)\]}])"  # ) ] }
    r"|(?P<reverse>\$)"  # deep-reversal reader macro
    r"|(?P<quote>')"  # quote reader macro
    r"|(?P<literal>[^\s()\[\]{}$']+)"  # numbers and symbols
)

_NORMALISED = {OPEN: "(", CLOSE: ")"}


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_kind, token_text) tuples."""
    for match in TOKEN_RE.finditer(source):
        kind = match.lastgroup
        if kind == "ws":
            continue
        text = match.group(kind)
        if not text:
            continue
        yield kind, _NORMALISED.get(kind, text)


def tokenize(source: str) -> list[Token]:
    return list(lex(source))


def is_open(char: str) -> bool:
    return char in OPENERS


def is_close(char: str) -> bool:
    return char in CLOSERS
