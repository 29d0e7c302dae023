import pytest

from rtlisp.builtin.env_builtin import global_environment
from rtlisp.interpreter import Interpreter


# Two interpreter flavours: a bare one (primitives only) and one with the
# bundled library loaded. Tests that only need the evaluator core use `env`.


@pytest.fixture
def env():
    """Fresh global environment over the primitive base frame."""
    return global_environment()


@pytest.fixture
def itp():
    return Interpreter(prelude=None)


@pytest.fixture(scope="module")
def library():
    return Interpreter()
