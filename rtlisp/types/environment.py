"""Runtime environment for rtlisp.

An Environment holds exactly one frame (a dict of Symbol -> value) and a link to
its enclosure, the lexically enclosing Environment. Every chain ends in the
distinguished EMPTY_ENV, which owns no frame.

Frames are shared, never copied: a closure captures the Environment object
itself, so `define`/`assign` on a frame are visible to every closure created
while that frame was reachable.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from rtlisp import LispValue
from rtlisp.errors import RtlArityError, RtlInvalidSymbol, RtlUnboundSymbol
from rtlisp.types.symbol import Symbol


class Environment:
    """One frame of bindings plus a reference to the enclosing Environment."""

    __slots__ = ("frame", "enclosure")

    def __init__(
        self,
        frame: Optional[dict[Symbol, LispValue]] = None,
        enclosure: Optional[Environment] = None,
    ):
        self.frame: Optional[dict[Symbol, LispValue]] = frame if frame is not None else {}
        self.enclosure: Optional[Environment] = enclosure if enclosure is not None else EMPTY_ENV

    @property
    def is_empty(self) -> bool:
        return self.frame is None

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain whose frame binds `name`."""
        env: Environment = self
        while not env.is_empty:
            if name in env.frame:
                return env
            env = env.enclosure
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`, searching outward through enclosures.

        Raises RtlUnboundSymbol if the chain is exhausted.
        """
        env = self.find(name)
        if env is None:
            raise RtlUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.frame[name]

    def define(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` in this environment's own frame, overwriting any prior binding."""
        if not isinstance(name, Symbol):
            raise RtlInvalidSymbol(f"Cannot define {name} as a symbol")
        if self.is_empty:
            raise RtlInvalidSymbol(f"Cannot define {name} in the empty environment")
        self.frame[name] = value
        return value

    def assign(self, name: Symbol, value: LispValue) -> LispValue:
        """Overwrite the nearest existing binding of `name` in place.

        Raises RtlUnboundSymbol if no frame in the chain binds `name`.
        """
        env = self.find(name)
        if env is None:
            raise RtlUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.frame[name] = value
        return value

    def extend(self, params: Iterable[Symbol], args: Iterable[LispValue]) -> Environment:
        """Return a new Environment whose single frame binds `params` to `args`
        positionally, enclosed by this one.
        """
        params = list(params)
        args = list(args)
        if len(params) != len(args):
            raise RtlArityError(
                f"Expected {len(params)} argument(s), got {len(args)}"
            )
        return Environment(dict(zip(params, args)), self)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.frame.items()))
        buffer.write("}")

    def __str__(self) -> str:
        if self.is_empty:
            return "{}"
        with StringIO() as buffer:
            self._write_vars(buffer)
            if not self.enclosure.is_empty:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while not env.is_empty:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.enclosure
            chain.append("<empty>")
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()


class _EmptyEnvironment(Environment):
    """Terminator of every environment chain; owns no frame."""

    __slots__ = ()

    def __init__(self):
        self.frame = None
        self.enclosure = None


EMPTY_ENV: Environment = _EmptyEnvironment()


def extend_environment(
    params: Iterable[Symbol], args: Iterable[LispValue], base: Environment
) -> Environment:
    """Functional spelling of `base.extend(params, args)`."""
    return base.extend(params, args)
