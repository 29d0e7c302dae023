"""Closure representation for rtlisp."""

from __future__ import annotations

from io import StringIO

from rtlisp import Node, SExpression
from rtlisp.types.environment import Environment
from rtlisp.types.symbol import Symbol


class Closure:
    """A function value: formal parameters, analyzed body, and defining env.

    The env is held by reference; it is never copied on capture.
    """

    __slots__ = ("params", "body", "env", "source")

    def __init__(
        self,
        params: list[Symbol],
        body: Node,
        env: Environment,
        source: list[SExpression] | None = None,
    ):
        self.params: list[Symbol] = params
        self.body: Node = body
        self.env: Environment = env
        # Unanalyzed body forms, kept for display only
        self.source: list[SExpression] = source if source is not None else []

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<fun (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
