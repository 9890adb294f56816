import pytest

from mlisp.interpreter import Interpreter
from mlisp.runtime_context import set_output
from mlisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter with its own session environment."""
    return Interpreter()


@pytest.fixture(autouse=True)
def _restore_output():
    # Tests that redirect print output must not leak into the next test.
    yield
    set_output(None)
