"""
Pytest configuration for operator core tests.
"""

import pytest

from opcore.config.config import reset_config
from opcore.operators import BUILT_IN_OPERATORS, OperatorKind
from opcore.utils import logger as logger_module


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch):
    """Each test starts with no cached config or logger."""
    # setenv before delenv so teardown also removes values a .env file loads
    for name in ("OPCORE_LOG_LEVEL", "OPCORE_LOG_DIR", "OPCORE_LOG_COLOR"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    reset_config()
    monkeypatch.setattr(logger_module, "_logger", None)
    monkeypatch.setattr(logger_module.OpcoreLogger, "_instance", None)
    monkeypatch.setattr(logger_module.OpcoreLogger, "_initialized", False)
    yield
    reset_config()


@pytest.fixture
def add_op():
    return BUILT_IN_OPERATORS[OperatorKind.ADDITION]


@pytest.fixture
def sub_op():
    return BUILT_IN_OPERATORS[OperatorKind.SUBTRACTION]


@pytest.fixture
def mul_op():
    return BUILT_IN_OPERATORS[OperatorKind.MULTIPLICATION]


@pytest.fixture
def div_op():
    return BUILT_IN_OPERATORS[OperatorKind.DIVISION]


@pytest.fixture
def mod_op():
    return BUILT_IN_OPERATORS[OperatorKind.MODULO]


@pytest.fixture
def pow_op():
    return BUILT_IN_OPERATORS[OperatorKind.POWER]
