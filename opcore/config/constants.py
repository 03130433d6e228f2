"""
Centralized constants for the operator core.

Precedence tiers, operator symbols and the numeric limits that define
observable results. These are NOT configurable: changing any of them changes
what an expression evaluates to.
"""

from typing import FrozenSet


# ==================== Precedence Tiers ====================

# Higher binds tighter.
# addition = subtraction < multiplication < division < modulo < power < unary
PRECEDENCE_ADDITION = 500
PRECEDENCE_SUBTRACTION = PRECEDENCE_ADDITION
PRECEDENCE_MULTIPLICATION = 1000
PRECEDENCE_DIVISION = 1500
PRECEDENCE_MODULO = 2000
PRECEDENCE_POWER = 10000
PRECEDENCE_UNARY_MINUS = 20000
PRECEDENCE_UNARY_PLUS = PRECEDENCE_UNARY_MINUS


# ==================== Symbols ====================

SYMBOL_PLUS = "+"
SYMBOL_MINUS = "-"
SYMBOL_MULTIPLY = "*"
SYMBOL_DIVIDE = "/"
SYMBOL_DIVIDE_SIGN = "÷"  # division sign, synonym for "/"
SYMBOL_POWER = "^"
SYMBOL_MODULO = "%"

# Characters allowed to appear in an operator symbol.
ALLOWED_OPERATOR_CHARS: FrozenSet[str] = frozenset("+-*/%^!#§$&;:~<>|=÷¬∙")


# ==================== Numeric Limits ====================

# Fractional digits kept by division (ROUND_HALF_UP).
DIVISION_SCALE = 10

# Largest exponent eligible for the exact integer-power path.
MAX_EXACT_EXPONENT = 999_999_999

# Significant digits carried by the exact integer-power path. Results longer
# than this are rounded once before float conversion.
POWER_PRECISION = 1000

# Decimal exponent range of the integer-power path. Far beyond float range, so
# anything clamped here is already +-inf or 0.0 as a float.
POWER_EMAX = 999_999
POWER_EMIN = -999_999


# ==================== Logging ====================

DEFAULT_LOG_LEVEL = "WARNING"
LOGGER_NAME = "opcore"
ERROR_LOGGER_NAME = "opcore.errors"
