"""
Shared fixtures for integration tests.
"""

import pytest

from evocgp import Config


@pytest.fixture
def parity_config():
    """A single-row chromosome wide enough for even 3-parity."""
    config = Config()
    config.rows            = 1
    config.columns         = 20
    config.levels_back     = 20
    config.num_inputs      = 3
    config.num_outputs     = 1
    config.generations     = 20000
    config.runs            = 1
    config.report_interval = 0
    return config


@pytest.fixture
def quadratic_config():
    """A 2x8 chromosome with one input, for regression of a quadratic."""
    config = Config()
    config.rows            = 2
    config.columns         = 8
    config.levels_back     = 8
    config.num_inputs      = 1
    config.num_outputs     = 1
    config.generations     = 20000
    config.runs            = 1
    config.report_interval = 0
    return config


@pytest.fixture
def write_ini(tmp_path):
    """Write an INI configuration file and return its path."""
    def _write(text):
        path = tmp_path / "config.ini"
        path.write_text(text)
        return str(path)
    return _write
