"""
Unit Tests for Expression models

Tests for Literal, Application, Result, evaluate(), render() and leaves().
"""

import pytest

from countdown_toolkit.core.models import (
    Application,
    ExpressionError,
    Literal,
    Operator,
    Result,
    evaluate,
    leaves,
    render,
)


@pytest.fixture
def answer_765():
    """(1 + 50) * (25 - 10)"""
    return Application(
        Operator.MUL,
        Application(Operator.ADD, Literal(1), Literal(50)),
        Application(Operator.SUB, Literal(25), Literal(10)),
    )


class TestExpressionModels:
    """Tests for the node dataclasses."""

    def test_literal_when_frozen_then_immutable(self):
        lit = Literal(5)
        with pytest.raises(AttributeError):
            lit.value = 6  # type: ignore

    def test_application_when_same_structure_then_equal_and_hashable(self):
        a = Application(Operator.ADD, Literal(1), Literal(2))
        b = Application(Operator.ADD, Literal(1), Literal(2))
        assert a == b
        assert len({a, b}) == 1

    def test_application_when_child_shared_then_same_object(self):
        """Children are referenced, not copied."""
        shared = Application(Operator.ADD, Literal(1), Literal(2))
        parent1 = Application(Operator.MUL, shared, Literal(3))
        parent2 = Application(Operator.SUB, Literal(10), shared)
        assert parent1.left is parent2.right


class TestEvaluate:
    """Tests for evaluate()."""

    def test_evaluate_when_literal_then_returns_value(self):
        assert evaluate(Literal(7)) == 7

    def test_evaluate_when_nested_then_computes_value(self, answer_765):
        assert evaluate(answer_765) == 765

    def test_evaluate_when_operands_not_canonical_then_still_evaluates(self):
        """Ordering is a search rule, not an arithmetic one."""
        assert evaluate(Application(Operator.ADD, Literal(50), Literal(1))) == 51

    def test_evaluate_when_non_positive_subtraction_then_raises_error(self):
        with pytest.raises(ExpressionError, match="Non-positive subtraction"):
            evaluate(Application(Operator.SUB, Literal(3), Literal(5)))

    def test_evaluate_when_inexact_division_then_raises_error(self):
        with pytest.raises(ExpressionError, match="Inexact division"):
            evaluate(Application(Operator.DIV, Literal(7), Literal(2)))

    def test_evaluate_when_zero_leaf_then_raises_error(self):
        with pytest.raises(ExpressionError, match="must be positive"):
            evaluate(Application(Operator.ADD, Literal(0), Literal(2)))

    def test_expression_error_when_raised_then_is_value_error(self):
        assert issubclass(ExpressionError, ValueError)


class TestRender:
    """Tests for render() and leaves()."""

    def test_render_when_literal_then_plain_number(self):
        assert render(Literal(25)) == "25"

    def test_render_when_nested_then_brackets_inner_applications(self, answer_765):
        assert render(answer_765) == "(1 + 50) * (25 - 10)"

    def test_render_when_one_side_literal_then_no_brackets_for_literal(self):
        expr = Application(
            Operator.DIV,
            Application(Operator.MUL, Literal(4), Literal(6)),
            Literal(3),
        )
        assert render(expr) == "(4 * 6) / 3"

    def test_str_when_application_then_same_as_render(self, answer_765):
        assert str(answer_765) == render(answer_765)

    def test_leaves_when_nested_then_left_to_right(self, answer_765):
        assert leaves(answer_765) == (1, 50, 25, 10)


class TestResult:
    """Tests for Result."""

    def test_leaf_when_called_then_wraps_literal(self):
        r = Result.leaf(9)
        assert r.expression == Literal(9)
        assert r.value == 9

    def test_repr_when_called_then_shows_text_and_value(self, answer_765):
        assert repr(Result(answer_765, 765)) == "Result((1 + 50) * (25 - 10), 765)"
