import pytest

from bebop.builtin import env_builtin
from bebop.interpreter import Interpreter
from bebop.types.environment import Environment


@pytest.fixture
def env():
    """Root environment holding only the primitive library."""
    env = Environment()
    env_builtin.register(env)
    return env


@pytest.fixture(scope="module")
def interp():
    """Interpreter bootstrapped with the standard prelude.

    Module scoped: bootstrapping parses and evaluates the prelude files.
    Tests that define names use names of their own.
    """
    return Interpreter()


@pytest.fixture
def bare():
    """Interpreter with primitives only."""
    return Interpreter(prelude=None)
