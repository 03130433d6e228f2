"""
Operator error types.

Unknown symbols are normally signalled by a None lookup result; the
exceptions here cover failures that must reach the caller as a distinct kind.
"""

from typing import Any


class OperatorError(Exception):
    """Base class for operator core failures."""


class DivisionByZeroError(OperatorError, ZeroDivisionError):
    """Division or modulo with a divisor of exactly zero."""

    def __init__(self, operator: str, dividend: Any):
        self.operator = operator
        self.dividend = dividend
        super().__init__(f"Division by zero: {dividend!r} {operator} 0")


class UnknownOperatorError(OperatorError, LookupError):
    """No built-in operator matches the symbol."""

    def __init__(self, symbol: str, arity: int, supported: str = ""):
        self.symbol = symbol
        self.arity = arity
        msg = f"Unknown operator '{symbol}' (arity {arity})"
        if supported:
            msg += f". Supported: {supported}"
        super().__init__(msg)
