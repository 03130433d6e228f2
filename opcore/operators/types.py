"""
Operator type definitions.

The operator set is closed: OperatorKind enumerates every built-in, and each
catalog entry is a frozen Operator carrying its evaluation function.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Sequence

from ..config.constants import ALLOWED_OPERATOR_CHARS


class OperatorKind(Enum):
    """Built-in operator variants."""
    ADDITION = auto()
    SUBTRACTION = auto()
    MULTIPLICATION = auto()
    DIVISION = auto()
    POWER = auto()
    MODULO = auto()
    UNARY_MINUS = auto()
    UNARY_PLUS = auto()


OperatorFunction = Callable[[Sequence[float]], float]


def is_operator_character(ch: str) -> bool:
    """Check if a character may appear in an operator symbol."""
    return len(ch) == 1 and ch in ALLOWED_OPERATOR_CHARS


@dataclass(frozen=True)
class Operator:
    """
    A single arithmetic operator.

    Attributes:
        kind: Which built-in this is
        symbol: Operator character as written in source text
        arity: Number of operands (1 = unary, 2 = binary)
        is_left_associative: Grouping of adjacent equal-precedence operators
        precedence: Binding strength, higher binds tighter
        function: Evaluation function taking the operand sequence

    (symbol, arity) identifies an operator; symbol alone does not.
    """
    kind: OperatorKind
    symbol: str
    arity: int
    is_left_associative: bool
    precedence: int
    function: OperatorFunction = field(repr=False, compare=False)

    def __post_init__(self):
        if self.arity not in (1, 2):
            raise ValueError(f"Operator '{self.symbol}': arity must be 1 or 2, got {self.arity}")
        if not self.symbol or not all(is_operator_character(ch) for ch in self.symbol):
            raise ValueError(f"Invalid operator symbol: '{self.symbol}'")

    @property
    def is_unary(self) -> bool:
        return self.arity == 1

    def apply(self, *operands: float) -> float:
        """
        Evaluate the operator.

        Accepts operands positionally (op.apply(a, b)) or as one list/tuple
        (op.apply([a, b])). Operand 0 is the left (or only) operand. The count
        is not checked; callers pass exactly `arity` values.

        Raises:
            DivisionByZeroError: "/" or "%" with a zero divisor
        """
        if len(operands) == 1 and isinstance(operands[0], (list, tuple)):
            operands = tuple(operands[0])
        return self.function(operands)
