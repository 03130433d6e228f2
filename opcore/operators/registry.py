"""
Operator Registry - Single source of truth for built-in operator lookup.

Resolves a (symbol, arity) pair to a catalog entry. Used by:
- Parsing (resolve a token plus its contextual arity)
- Evaluation (call Operator.apply on the resolved entry)

Resolution rules:
- "+" / "-": arity exactly 1 gives the unary form; ANY other arity (0, 2, 3...)
  gives the binary form. Callers are trusted to pass a correct arity.
- "*", "/", "÷": always the binary form ("÷" is a synonym for "/")
- "^", "%": always their single binary form
- Anything else: None (the caller reports the unknown operator)
"""

from typing import FrozenSet, Mapping, Optional, Tuple

from ..config.constants import (
    SYMBOL_DIVIDE,
    SYMBOL_DIVIDE_SIGN,
    SYMBOL_MINUS,
    SYMBOL_MODULO,
    SYMBOL_MULTIPLY,
    SYMBOL_PLUS,
    SYMBOL_POWER,
)
from ..utils.logger import get_logger
from .builtins import BUILT_IN_OPERATORS
from .errors import UnknownOperatorError
from .types import Operator, OperatorKind


# =============================================================================
# SYMBOL TABLES
# =============================================================================

# Symbols whose meaning depends on arity: (binary kind, unary kind)
_ARITY_DEPENDENT: Mapping[str, Tuple[OperatorKind, OperatorKind]] = {
    SYMBOL_PLUS: (OperatorKind.ADDITION, OperatorKind.UNARY_PLUS),
    SYMBOL_MINUS: (OperatorKind.SUBTRACTION, OperatorKind.UNARY_MINUS),
}

# Symbols with a single binary meaning
_BINARY_ONLY: Mapping[str, OperatorKind] = {
    SYMBOL_MULTIPLY: OperatorKind.MULTIPLICATION,
    SYMBOL_DIVIDE: OperatorKind.DIVISION,
    SYMBOL_DIVIDE_SIGN: OperatorKind.DIVISION,
    SYMBOL_POWER: OperatorKind.POWER,
    SYMBOL_MODULO: OperatorKind.MODULO,
}

# All symbols the registry resolves (including the division synonym)
BUILT_IN_SYMBOLS: FrozenSet[str] = frozenset(_ARITY_DEPENDENT) | frozenset(_BINARY_ONLY)


def get_builtin_operator(symbol: str, arity: int) -> Optional[Operator]:
    """
    Resolve a built-in operator.

    Args:
        symbol: Operator symbol as written ("+", "-", "*", "/", "÷", "^", "%")
        arity: Operand count determined by the caller's context

    Returns:
        The shared catalog entry, or None if the symbol is not a built-in
    """
    kinds = _ARITY_DEPENDENT.get(symbol)
    if kinds is not None:
        binary, unary = kinds
        return BUILT_IN_OPERATORS[unary if arity == 1 else binary]

    kind = _BINARY_ONLY.get(symbol)
    if kind is None:
        get_logger().arith("UNKNOWN_OPERATOR", symbol, arity=arity)
        return None
    return BUILT_IN_OPERATORS[kind]


# Name used by expression parsers
lookup_builtin_operator = get_builtin_operator


def require_builtin_operator(symbol: str, arity: int) -> Operator:
    """
    Resolve a built-in operator, raising when the symbol is unknown.

    Raises:
        UnknownOperatorError: If no built-in matches
    """
    op = get_builtin_operator(symbol, arity)
    if op is None:
        raise UnknownOperatorError(symbol, arity, " ".join(sorted(BUILT_IN_SYMBOLS)))
    return op


def is_builtin_symbol(symbol: str) -> bool:
    """Check if a symbol resolves to a built-in operator."""
    return symbol in BUILT_IN_SYMBOLS
