from __future__ import annotations

import logging
import sys
from typing import Literal, TextIO

from rtlisp import LispValue
from rtlisp.builtin.env_builtin import global_environment
from rtlisp.config import get_log_level, get_recursion_limit
from rtlisp.errors import RtlError, RtlSyntaxError
from rtlisp.evaluation.analyzer import evaluate
from rtlisp.modules.prelude_loader import load_prelude
from rtlisp.printer import to_lisp
from rtlisp.reader.parser import read
from rtlisp.reader.tokenizer import is_close, is_open
from rtlisp.types.environment import Environment

logger = logging.getLogger(__name__)


def bracket_depth(code: str) -> int:
    """Openers minus closers, counted across all three bracket families."""
    depth = 0
    for ch in code:
        if is_open(ch):
            depth += 1
        elif is_close(ch):
            depth -= 1
    return depth


def parens_balanced(code: str) -> bool:
    return bracket_depth(code) == 0


class Interpreter:
    """
    Reads and evaluates rtlisp code against one global environment,
    so definitions persist across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        self.env: Environment = global_environment()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        self.eval_all(code)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level expression in `code`, returning each result."""
        if not parens_balanced(code):
            raise RtlSyntaxError("BAD SYNTAX -- parentheses unbalanced!")
        results: list[LispValue] = []
        for expr in read(code):
            results.append(evaluate(expr, self.env))
        return results

    def eval(self, code: str) -> LispValue:
        results = self.eval_all(code)
        if not results:
            return []
        if len(results) == 1:
            return results[0]
        return results


def repl(
    interp: Interpreter,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    prompt: str = "rtl> ",
    continuation: str = "...  ",
) -> None:
    """Line-oriented read-eval-print loop.

    Input is accumulated until its brackets balance; errors are reported and
    the loop carries on with the next input.
    """
    pending: list[str] = []
    stdout.write(prompt)
    stdout.flush()
    for line in stdin:
        pending.append(line)
        code = "".join(pending)
        if bracket_depth(code) > 0:
            stdout.write(continuation)
            stdout.flush()
            continue
        pending.clear()
        try:
            for result in interp.eval_all(code):
                stdout.write(to_lisp(result) + "\n")
        except (RtlError, ZeroDivisionError, RecursionError) as ex:
            logger.debug("evaluation failed", exc_info=True)
            stdout.write(f"error: {ex}\n")
        stdout.write(prompt)
        stdout.flush()
    stdout.write("\n")


def main() -> None:
    logging.basicConfig(level=get_log_level())
    repl(Interpreter())


if __name__ == "__main__":
    main()
