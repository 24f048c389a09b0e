import pytest

from frothy.interpreter import Interpreter
from frothy.types.environment import Environment
from frothy.builtin.env_builtin import register


@pytest.fixture
def interp():
    """Interpreter with the default builtins."""
    return Interpreter()


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(interp):
    return interp.interpret
