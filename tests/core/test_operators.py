"""
Unit Tests for Operator rules

Tests for valid_combination() and apply().
"""

import pytest

from countdown_toolkit.core.models.operators import (
    OPERATORS,
    Operator,
    apply,
    valid_combination,
)


class TestOperator:
    """Tests for the Operator enum."""

    def test_symbol_when_called_then_matches_value(self):
        assert [op.symbol for op in OPERATORS] == ["+", "-", "*", "/"]

    def test_from_symbol_when_known_then_returns_operator(self):
        assert Operator.from_symbol("*") is Operator.MUL

    def test_from_symbol_when_unknown_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown operator symbol"):
            Operator.from_symbol("^")


class TestValidCombination:
    """Tests for the admissibility rule."""

    # ─────────────────────────────────────────────────────────────────────────
    # Per-operator rules
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("x, y, expected", [(2, 3, True), (3, 3, True), (3, 2, False)])
    def test_add_when_ordered_then_only_ascending_allowed(self, x, y, expected):
        assert valid_combination(Operator.ADD, x, y) is expected

    @pytest.mark.parametrize("x, y, expected", [(5, 3, True), (3, 3, False), (3, 5, False)])
    def test_sub_when_called_then_requires_positive_result(self, x, y, expected):
        assert valid_combination(Operator.SUB, x, y) is expected

    @pytest.mark.parametrize("x, y, expected", [
        (2, 3, True),
        (3, 3, True),
        (3, 2, False),
        (1, 5, False),
        (5, 1, False),
    ])
    def test_mul_when_called_then_rejects_identity_and_descending(self, x, y, expected):
        assert valid_combination(Operator.MUL, x, y) is expected

    @pytest.mark.parametrize("x, y, expected", [
        (6, 3, True),
        (3, 3, True),
        (7, 2, False),
        (6, 1, False),
        (2, 6, False),
    ])
    def test_div_when_called_then_requires_exact_non_identity(self, x, y, expected):
        assert valid_combination(Operator.DIV, x, y) is expected

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    def test_valid_combination_when_admitted_then_result_positive(self):
        """Every admitted application stays in the positive integers."""
        for op in OPERATORS:
            for x in range(1, 30):
                for y in range(1, 30):
                    if valid_combination(op, x, y):
                        assert apply(op, x, y) > 0

    @pytest.mark.parametrize("op", [Operator.ADD, Operator.MUL])
    def test_commutative_when_operands_differ_then_only_one_order_admitted(self, op):
        for x in range(1, 30):
            for y in range(1, 30):
                if x != y:
                    assert not (valid_combination(op, x, y) and valid_combination(op, y, x))


class TestApply:
    """Tests for apply()."""

    @pytest.mark.parametrize("op, x, y, expected", [
        (Operator.ADD, 1, 50, 51),
        (Operator.SUB, 25, 10, 15),
        (Operator.MUL, 15, 51, 765),
        (Operator.DIV, 100, 4, 25),
    ])
    def test_apply_when_called_then_returns_arithmetic_result(self, op, x, y, expected):
        assert apply(op, x, y) == expected
