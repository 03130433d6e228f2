"""
opcore - Arithmetic operator core

Built-in operators for an expression evaluator: symbols, arities,
associativity, precedence and decimal-accurate evaluation.
"""

__version__ = "1.0.0"
__author__ = "opcore"

from .config import get_config
from .operators import (
    Operator,
    OperatorKind,
    DivisionByZeroError,
    UnknownOperatorError,
    get_builtin_operator,
    lookup_builtin_operator,
    require_builtin_operator,
)

__all__ = [
    "__version__",
    "get_config",
    "Operator",
    "OperatorKind",
    "DivisionByZeroError",
    "UnknownOperatorError",
    "get_builtin_operator",
    "lookup_builtin_operator",
    "require_builtin_operator",
]
