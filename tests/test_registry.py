"""
Tests for built-in operator resolution.

Validates that:
1. (symbol, arity) resolves to exactly one catalog entry
2. "+" / "-" fall back to the binary form for any arity other than 1
3. "*", "/", "÷", "^", "%" ignore the requested arity
4. Unknown symbols resolve to None (require_* raises instead)
"""

import dataclasses

import pytest

from opcore.config.constants import (
    PRECEDENCE_ADDITION,
    PRECEDENCE_DIVISION,
    PRECEDENCE_MODULO,
    PRECEDENCE_MULTIPLICATION,
    PRECEDENCE_POWER,
    PRECEDENCE_UNARY_MINUS,
)
from opcore.operators import (
    BUILT_IN_OPERATORS,
    BUILT_IN_SYMBOLS,
    Operator,
    OperatorKind,
    UnknownOperatorError,
    get_builtin_operator,
    is_builtin_symbol,
    is_operator_character,
    lookup_builtin_operator,
    require_builtin_operator,
)


class TestArityDependentSymbols:
    """Test resolution of "+" and "-"."""

    def test_plus_arity_one_is_unary_plus(self):
        """lookup('+', 1) is the identity operator."""
        op = get_builtin_operator("+", 1)
        assert op.kind == OperatorKind.UNARY_PLUS
        assert op.arity == 1
        assert op.apply(4.25) == 4.25

    def test_plus_arity_two_is_addition(self):
        op = get_builtin_operator("+", 2)
        assert op.kind == OperatorKind.ADDITION
        assert op.arity == 2

    @pytest.mark.parametrize("arity", [0, 2, 3, -1, 100])
    def test_plus_other_arity_falls_back_to_binary(self, arity):
        """Any arity other than exactly 1 resolves to the binary form."""
        assert get_builtin_operator("+", arity) is BUILT_IN_OPERATORS[OperatorKind.ADDITION]

    def test_minus_arity_one_is_unary_minus(self):
        op = get_builtin_operator("-", 1)
        assert op.kind == OperatorKind.UNARY_MINUS
        assert op.apply(3.0) == -3.0

    @pytest.mark.parametrize("arity", [0, 2, 3])
    def test_minus_other_arity_falls_back_to_binary(self, arity):
        assert get_builtin_operator("-", arity) is BUILT_IN_OPERATORS[OperatorKind.SUBTRACTION]

    def test_unary_and_binary_are_distinct_instances(self):
        """Same symbol, different arity -> different operators."""
        assert get_builtin_operator("+", 1) is not get_builtin_operator("+", 2)
        assert get_builtin_operator("-", 1) is not get_builtin_operator("-", 2)


class TestBinaryOnlySymbols:
    """Test symbols with a single binary meaning."""

    @pytest.mark.parametrize("symbol,kind", [
        ("*", OperatorKind.MULTIPLICATION),
        ("/", OperatorKind.DIVISION),
        ("÷", OperatorKind.DIVISION),
        ("^", OperatorKind.POWER),
        ("%", OperatorKind.MODULO),
    ])
    @pytest.mark.parametrize("arity", [1, 2])
    def test_arity_is_ignored(self, symbol, kind, arity):
        op = get_builtin_operator(symbol, arity)
        assert op.kind == kind
        assert op.arity == 2

    def test_division_sign_is_same_operator_as_slash(self):
        """lookup('÷', 2) and lookup('/', 2) are the identical object."""
        assert get_builtin_operator("÷", 2) is get_builtin_operator("/", 2)
        assert get_builtin_operator("÷", 2).symbol == "/"

    def test_lookups_return_shared_catalog_entries(self):
        """Repeated lookups never build new operators."""
        assert get_builtin_operator("*", 2) is get_builtin_operator("*", 2)
        assert get_builtin_operator("^", 2) is BUILT_IN_OPERATORS[OperatorKind.POWER]


class TestUnknownSymbols:
    """Test absence signalling."""

    @pytest.mark.parametrize("symbol", ["@", "", "x", "**", "//", "!", "+-"])
    def test_unknown_symbol_returns_none(self, symbol):
        assert get_builtin_operator(symbol, 2) is None

    def test_lookup_alias(self):
        assert lookup_builtin_operator is get_builtin_operator
        assert lookup_builtin_operator("@", 2) is None

    def test_require_raises_unknown_operator(self):
        with pytest.raises(UnknownOperatorError, match="Unknown operator '@'") as exc_info:
            require_builtin_operator("@", 2)
        assert exc_info.value.symbol == "@"
        assert exc_info.value.arity == 2
        assert isinstance(exc_info.value, LookupError)

    def test_require_returns_known_operator(self):
        assert require_builtin_operator("-", 1).kind == OperatorKind.UNARY_MINUS

    def test_builtin_symbols(self):
        assert BUILT_IN_SYMBOLS == frozenset("+-*/÷^%")
        assert is_builtin_symbol("÷")
        assert not is_builtin_symbol("@")


class TestOperatorAttributes:
    """Test associativity, precedence and catalog invariants."""

    def test_left_associativity(self):
        for symbol in "+-*/%":
            assert get_builtin_operator(symbol, 2).is_left_associative, symbol

    def test_power_and_unary_not_left_associative(self):
        assert not get_builtin_operator("^", 2).is_left_associative
        assert not get_builtin_operator("-", 1).is_left_associative
        assert not get_builtin_operator("+", 1).is_left_associative

    def test_precedence_order(self):
        """addition = subtraction < mul < div < mod < power < unary."""
        prec = {op.kind: op.precedence for op in BUILT_IN_OPERATORS.values()}
        assert prec[OperatorKind.ADDITION] == prec[OperatorKind.SUBTRACTION] == PRECEDENCE_ADDITION
        assert prec[OperatorKind.ADDITION] < prec[OperatorKind.MULTIPLICATION]
        assert prec[OperatorKind.MULTIPLICATION] < prec[OperatorKind.DIVISION]
        assert prec[OperatorKind.DIVISION] < prec[OperatorKind.MODULO]
        assert prec[OperatorKind.MODULO] < prec[OperatorKind.POWER]
        assert prec[OperatorKind.POWER] < prec[OperatorKind.UNARY_MINUS]
        assert prec[OperatorKind.UNARY_MINUS] == prec[OperatorKind.UNARY_PLUS]
        assert (PRECEDENCE_MULTIPLICATION, PRECEDENCE_DIVISION, PRECEDENCE_MODULO,
                PRECEDENCE_POWER, PRECEDENCE_UNARY_MINUS) == (
            prec[OperatorKind.MULTIPLICATION], prec[OperatorKind.DIVISION],
            prec[OperatorKind.MODULO], prec[OperatorKind.POWER], prec[OperatorKind.UNARY_MINUS])

    def test_catalog_covers_every_kind(self):
        assert set(BUILT_IN_OPERATORS) == set(OperatorKind)

    def test_symbol_arity_pairs_are_unique(self):
        pairs = [(op.symbol, op.arity) for op in BUILT_IN_OPERATORS.values()]
        assert len(pairs) == len(set(pairs))

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            BUILT_IN_OPERATORS[OperatorKind.ADDITION] = BUILT_IN_OPERATORS[OperatorKind.SUBTRACTION]

    def test_operator_is_frozen(self):
        op = get_builtin_operator("+", 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            op.precedence = 0


class TestOperatorConstruction:
    """Test Operator validation."""

    def _noop(self, operands):
        return operands[0]

    def test_valid_custom_operator(self):
        op = Operator(OperatorKind.UNARY_PLUS, "~", 1, False, 1, self._noop)
        assert op.is_unary
        assert op.apply(2.0) == 2.0

    @pytest.mark.parametrize("arity", [0, 3])
    def test_invalid_arity_raises(self, arity):
        with pytest.raises(ValueError, match="arity must be 1 or 2"):
            Operator(OperatorKind.ADDITION, "+", arity, True, 1, self._noop)

    @pytest.mark.parametrize("symbol", ["", "a", "+a", " "])
    def test_invalid_symbol_raises(self, symbol):
        with pytest.raises(ValueError, match="Invalid operator symbol"):
            Operator(OperatorKind.ADDITION, symbol, 2, True, 1, self._noop)

    def test_is_operator_character(self):
        for ch in "+-*/%^!#§$&;:~<>|=÷¬∙":
            assert is_operator_character(ch), ch
        assert not is_operator_character("a")
        assert not is_operator_character("1")
        assert not is_operator_character("++")


class TestConcurrentUse:
    """Test that the read-only catalog is safe to share across threads."""

    def test_parallel_lookup_and_apply(self):
        from concurrent.futures import ThreadPoolExecutor

        def work(i):
            if i % 2:
                return get_builtin_operator("+", 2).apply(0.1, 0.2)
            return get_builtin_operator("/", 2).apply(1.0, 4.0)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, range(200)))

        assert results == [0.3 if i % 2 else 0.25 for i in range(200)]
