"""Pytest configuration and shared fixtures."""

import operator
import pytest
import sys
from loguru  import logger
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from evocgp.functions  import Function, FunctionSet
from evocgp.run.config import Config


def make_test_function_set() -> FunctionSet:
    """Four arithmetic functions, all of arity 2."""
    return FunctionSet(Function("Addition"      , 2, operator.add),
                       Function("Subtraction"   , 2, operator.sub),
                       Function("Multiplication", 2, operator.mul),
                       Function("Division"      , 2, lambda a, b: a if b == 0 else a / b))


@pytest.fixture
def test_function_set():
    """Provide a fresh arithmetic function set."""
    return make_test_function_set()


@pytest.fixture
def config(test_function_set):
    """Provide a default configuration bound to the arithmetic function set."""
    config = Config()
    config.set_function_set(test_function_set)
    return config


@pytest.fixture
def small_config(test_function_set):
    """Provide the 3x3 topology used by the known-wiring tests."""
    config = Config()
    config.rows        = 3
    config.columns     = 3
    config.num_inputs  = 3
    config.num_outputs = 2
    config.levels_back = 3
    config.set_function_set(test_function_set)
    return config


@pytest.fixture
def log_messages():
    """Collect every message logged through loguru during the test."""
    messages = []
    logger.enable("evocgp")
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("evocgp")
