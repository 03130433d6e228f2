"""
Built-in operator catalog.

Defines the evaluation function for each OperatorKind and builds the
immutable BUILT_IN_OPERATORS table once, at import.

Semantics:
    - + - * %: decimal-exact, then nearest float
    - /: decimal quotient rounded to DIVISION_SCALE digits, ROUND_HALF_UP
    - / and % with a divisor of exactly zero raise DivisionByZeroError
    - ^: decimal-exact for integer exponents in [1, MAX_EXACT_EXPONENT],
      IEEE float pow otherwise (may return nan/inf, never raises)
    - Non-finite operands (nan, +-inf) skip the decimal route and use IEEE
      float arithmetic
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

import numpy as np

from ..config.constants import (
    DIVISION_SCALE,
    MAX_EXACT_EXPONENT,
    PRECEDENCE_ADDITION,
    PRECEDENCE_DIVISION,
    PRECEDENCE_MODULO,
    PRECEDENCE_MULTIPLICATION,
    PRECEDENCE_POWER,
    PRECEDENCE_SUBTRACTION,
    PRECEDENCE_UNARY_MINUS,
    PRECEDENCE_UNARY_PLUS,
    SYMBOL_DIVIDE,
    SYMBOL_MINUS,
    SYMBOL_MODULO,
    SYMBOL_MULTIPLY,
    SYMBOL_PLUS,
    SYMBOL_POWER,
)
from ..utils.logger import get_logger
from . import decimal_math as dm
from .errors import DivisionByZeroError
from .types import Operator, OperatorKind


def _finite(*values: float) -> bool:
    # ints are always finite; math.isfinite overflows on very large ones
    return all(isinstance(v, int) or math.isfinite(v) for v in values)


def _as_float(value: float) -> float:
    """float(value), with ints beyond float range mapped to +-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def _check_divisor(symbol: str, dividend: float, divisor: float) -> None:
    if divisor == 0:
        get_logger().arith("DIV_BY_ZERO", symbol, dividend=dividend)
        raise DivisionByZeroError(symbol, dividend)


# =============================================================================
# Evaluation functions
# =============================================================================

def _add(operands: Sequence[float]) -> float:
    a, b = operands[0], operands[1]
    if not _finite(a, b):
        return _as_float(a) + _as_float(b)
    return dm.to_float(dm.add(dm.to_decimal(a), dm.to_decimal(b)))


def _subtract(operands: Sequence[float]) -> float:
    a, b = operands[0], operands[1]
    if not _finite(a, b):
        return _as_float(a) - _as_float(b)
    return dm.to_float(dm.subtract(dm.to_decimal(a), dm.to_decimal(b)))


def _multiply(operands: Sequence[float]) -> float:
    a, b = operands[0], operands[1]
    if not _finite(a, b):
        return _as_float(a) * _as_float(b)
    return dm.to_float(dm.multiply(dm.to_decimal(a), dm.to_decimal(b)))


def _divide(operands: Sequence[float]) -> float:
    a, b = operands[0], operands[1]
    _check_divisor(SYMBOL_DIVIDE, a, b)
    if not _finite(a, b):
        return _as_float(a) / _as_float(b)
    return dm.to_float(dm.divide(dm.to_decimal(a), dm.to_decimal(b), DIVISION_SCALE))


def _modulo(operands: Sequence[float]) -> float:
    a, b = operands[0], operands[1]
    _check_divisor(SYMBOL_MODULO, a, b)
    if not _finite(a, b):
        with np.errstate(invalid='ignore'):
            return float(np.fmod(np.float64(_as_float(a)), np.float64(_as_float(b))))
    return dm.to_float(dm.remainder(dm.to_decimal(a), dm.to_decimal(b)))


def exact_exponent(exponent: float) -> Optional[int]:
    """
    Integer exponent for the decimal-exact power path, or None.

    Eligible when the exponent is a whole number in [1, MAX_EXACT_EXPONENT].
    Zero truncation (0.0, 0.5, -0.7, ...) is never eligible, which keeps the
    whole-number check itself clear of a modulo by zero.
    """
    if isinstance(exponent, int):
        return exponent if 0 < exponent <= MAX_EXACT_EXPONENT else None
    if not math.isfinite(exponent):
        return None
    exponent_int = int(exponent)
    if exponent_int == 0:
        return None
    if math.fmod(exponent, exponent_int) != 0:
        return None
    if exponent < 0 or exponent > MAX_EXACT_EXPONENT:
        return None
    return exponent_int


def float_power(base: float, exponent: float) -> float:
    """IEEE pow: out-of-domain inputs give nan, overflow gives +-inf."""
    with np.errstate(over='ignore', divide='ignore', invalid='ignore', under='ignore'):
        return float(np.power(np.float64(_as_float(base)), np.float64(_as_float(exponent))))


def _power(operands: Sequence[float]) -> float:
    base, exponent = operands[0], operands[1]
    exponent_int = exact_exponent(exponent)
    if exponent_int is not None and _finite(base):
        return dm.to_float(dm.integer_power(dm.to_decimal(base), exponent_int))
    get_logger().arith("FLOAT_POW", SYMBOL_POWER, base=base, exponent=exponent)
    return float_power(base, exponent)


def _unary_minus(operands: Sequence[float]) -> float:
    return -operands[0]


def _unary_plus(operands: Sequence[float]) -> float:
    return operands[0]


# =============================================================================
# Catalog
# =============================================================================

def _build_catalog() -> Mapping[OperatorKind, Operator]:
    operators = [
        Operator(OperatorKind.ADDITION, SYMBOL_PLUS, 2, True, PRECEDENCE_ADDITION, _add),
        Operator(OperatorKind.SUBTRACTION, SYMBOL_MINUS, 2, True, PRECEDENCE_SUBTRACTION, _subtract),
        Operator(OperatorKind.MULTIPLICATION, SYMBOL_MULTIPLY, 2, True, PRECEDENCE_MULTIPLICATION, _multiply),
        Operator(OperatorKind.DIVISION, SYMBOL_DIVIDE, 2, True, PRECEDENCE_DIVISION, _divide),
        Operator(OperatorKind.POWER, SYMBOL_POWER, 2, False, PRECEDENCE_POWER, _power),
        Operator(OperatorKind.MODULO, SYMBOL_MODULO, 2, True, PRECEDENCE_MODULO, _modulo),
        Operator(OperatorKind.UNARY_MINUS, SYMBOL_MINUS, 1, False, PRECEDENCE_UNARY_MINUS, _unary_minus),
        Operator(OperatorKind.UNARY_PLUS, SYMBOL_PLUS, 1, False, PRECEDENCE_UNARY_PLUS, _unary_plus),
    ]
    catalog = {op.kind: op for op in operators}
    missing = set(OperatorKind) - set(catalog)
    if missing:
        raise RuntimeError(f"Built-in catalog is missing: {sorted(k.name for k in missing)}")
    return MappingProxyType(catalog)


BUILT_IN_OPERATORS: Mapping[OperatorKind, Operator] = _build_catalog()
