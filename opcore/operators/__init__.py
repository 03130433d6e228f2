"""
Arithmetic operator core.

Design principles:
- Closed operator set (OperatorKind), one frozen Operator per kind
- (symbol, arity) resolves to exactly one catalog entry
- Binary arithmetic is decimal-exact before conversion back to float
- Division and modulo by exact zero raise DivisionByZeroError
- Unknown symbols resolve to None, never raise (unless require_* is used)
"""

from .types import (
    Operator,
    OperatorKind,
    is_operator_character,
)
from .errors import (
    OperatorError,
    DivisionByZeroError,
    UnknownOperatorError,
)
from .builtins import (
    BUILT_IN_OPERATORS,
    exact_exponent,
    float_power,
)
from .registry import (
    BUILT_IN_SYMBOLS,
    get_builtin_operator,
    lookup_builtin_operator,
    require_builtin_operator,
    is_builtin_symbol,
)

__all__ = [
    # Types
    "Operator",
    "OperatorKind",
    "is_operator_character",
    # Errors
    "OperatorError",
    "DivisionByZeroError",
    "UnknownOperatorError",
    # Catalog
    "BUILT_IN_OPERATORS",
    "exact_exponent",
    "float_power",
    # Registry
    "BUILT_IN_SYMBOLS",
    "get_builtin_operator",
    "lookup_builtin_operator",
    "require_builtin_operator",
    "is_builtin_symbol",
]
