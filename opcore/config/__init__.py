"""
Configuration management.
"""

from .config import (
    Config,
    LogConfig,
    get_config,
    reset_config,
)

from .constants import (
    PRECEDENCE_ADDITION,
    PRECEDENCE_SUBTRACTION,
    PRECEDENCE_MULTIPLICATION,
    PRECEDENCE_DIVISION,
    PRECEDENCE_MODULO,
    PRECEDENCE_POWER,
    PRECEDENCE_UNARY_MINUS,
    PRECEDENCE_UNARY_PLUS,
    ALLOWED_OPERATOR_CHARS,
    DIVISION_SCALE,
    MAX_EXACT_EXPONENT,
)

__all__ = [
    # Config classes
    "Config",
    "LogConfig",
    "get_config",
    "reset_config",
    # Constants
    "PRECEDENCE_ADDITION",
    "PRECEDENCE_SUBTRACTION",
    "PRECEDENCE_MULTIPLICATION",
    "PRECEDENCE_DIVISION",
    "PRECEDENCE_MODULO",
    "PRECEDENCE_POWER",
    "PRECEDENCE_UNARY_MINUS",
    "PRECEDENCE_UNARY_PLUS",
    "ALLOWED_OPERATOR_CHARS",
    "DIVISION_SCALE",
    "MAX_EXACT_EXPONENT",
]
