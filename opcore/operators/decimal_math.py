"""
Exact base-10 arithmetic for the binary operators.

Floats enter through their shortest round-trip text, so 0.1 becomes
Decimal("0.1") rather than the binary value nearest to it. Every operation
here is exact (or rounded exactly once, where noted) and the result is
converted back to the nearest float only at the end.

Semantics:
    - add / subtract / multiply / remainder: exact
    - divide: exact quotient rounded to `scale` fractional digits, ROUND_HALF_UP
    - remainder: truncating division, sign follows the dividend
    - integer_power: exact up to POWER_PRECISION significant digits
"""

from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Union

from ..config.constants import (
    DIVISION_SCALE,
    POWER_EMAX,
    POWER_EMIN,
    POWER_PRECISION,
)

Number = Union[int, float]

# Wide enough that add/sub/mul/divmod never round.
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

# Overflow and underflow are not trapped: they clamp to +-Infinity / 0, which
# is what the float conversion of the exact result would give anyway.
POWER_CONTEXT = Context(
    prec=POWER_PRECISION,
    Emax=POWER_EMAX,
    Emin=POWER_EMIN,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero],
)


def to_decimal(value: Number) -> Decimal:
    """
    Convert an operand to its exact decimal-text value.

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal(1e16)
        Decimal('1E+16')
        >>> to_decimal(7)
        Decimal('7')
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    return Decimal(repr(float(value)))


def to_float(value: Decimal) -> float:
    """Nearest float to a decimal value (out-of-range values become +-inf)."""
    return float(value)


def add(a: Decimal, b: Decimal) -> Decimal:
    with localcontext(EXACT_CONTEXT):
        return a + b


def subtract(a: Decimal, b: Decimal) -> Decimal:
    with localcontext(EXACT_CONTEXT):
        return a - b


def multiply(a: Decimal, b: Decimal) -> Decimal:
    with localcontext(EXACT_CONTEXT):
        return a * b


def divide(a: Decimal, b: Decimal, scale: int = DIVISION_SCALE) -> Decimal:
    """
    Quotient a / b rounded to `scale` fractional digits, ROUND_HALF_UP.

    Done as an integer divide-with-remainder on a scaled numerator so the only
    rounding is the final half-up step.

    Args:
        a: Dividend
        b: Divisor (must be non-zero)
        scale: Fractional digits to keep

    Returns:
        Decimal with exponent -scale
    """
    with localcontext(EXACT_CONTEXT):
        numerator = a.scaleb(scale)
        quotient, remainder = divmod(numerator, b)
        if remainder and abs(remainder) * 2 >= abs(b):
            # Half-up rounds away from zero; quotient is truncated toward zero.
            quotient += 1 if (numerator < 0) == (b < 0) else -1
        return quotient.scaleb(-scale)


def remainder(a: Decimal, b: Decimal) -> Decimal:
    """Remainder of truncating division; the sign follows the dividend."""
    with localcontext(EXACT_CONTEXT):
        return a % b


def integer_power(base: Decimal, exponent: int) -> Decimal:
    """base ** exponent for a non-negative integer exponent."""
    with localcontext(POWER_CONTEXT):
        return base ** exponent
