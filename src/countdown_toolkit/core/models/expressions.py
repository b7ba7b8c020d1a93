"""
Module: expressions

Purpose:
    Immutable expression trees built by the solver. A tree is either a
    Literal leaf holding a source number or an Application combining two
    sub-trees with an Operator.

Key Functions:
    - evaluate(expr): Value of an expression under the game rules
    - render(expr): Infix text such as "(1 + 50) * (25 - 10)"
    - leaves(expr): Source numbers used, left to right

Key Classes:
    - Literal: Leaf node
    - Application: Operator node
    - ExpressionError: Raised for expressions breaking the game rules

Dependencies:
    - dataclasses (std)
    - .operators.Operator

Used By:
    - core.models.results.Result
    - core.utils.serialization
    - solver.search
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .operators import Operator


class ExpressionError(ValueError):
    """Raised when an expression is not valid game arithmetic."""
    pass


@dataclass(frozen=True, slots=True)
class Literal:
    """
    Leaf node holding one source number.

    Example:
        >>> Literal(25)
        Literal(25)
    """

    value: int

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Literal({self.value})"


@dataclass(frozen=True, slots=True)
class Application:
    """
    Operator applied to two sub-expressions.

    Nodes are never mutated, so a single sub-expression may be shared by
    any number of parents. The solver relies on this: each left/right
    result is referenced, not copied, by every candidate built on it.

    Attributes:
        op: Operator to apply
        left: Left operand expression
        right: Right operand expression

    Example:
        >>> e = Application(Operator.ADD, Literal(1), Literal(50))
        >>> str(e)
        '1 + 50'
    """

    op: Operator
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return render(self)


Expression = Union[Literal, Application]


def evaluate(expr: Expression) -> int:
    """
    Evaluate an expression with the game's arithmetic rules.

    Every leaf and every intermediate value must be a positive integer
    and every division must be exact. Operand ordering is not checked,
    so ``50 + 1`` evaluates fine even though the solver would only ever
    build ``1 + 50``.

    Args:
        expr: Expression to evaluate

    Returns:
        Positive integer value

    Raises:
        ExpressionError: If any step leaves the positive integers

    Example:
        >>> evaluate(Application(Operator.SUB, Literal(25), Literal(10)))
        15
    """
    if isinstance(expr, Literal):
        if expr.value <= 0:
            raise ExpressionError(f"Source number must be positive: {expr.value}")
        return expr.value

    x = evaluate(expr.left)
    y = evaluate(expr.right)
    op = expr.op

    if op is Operator.ADD:
        return x + y
    if op is Operator.SUB:
        if x <= y:
            raise ExpressionError(f"Non-positive subtraction: {x} - {y}")
        return x - y
    if op is Operator.MUL:
        return x * y
    if op is Operator.DIV:
        if x % y != 0:
            raise ExpressionError(f"Inexact division: {x} / {y}")
        return x // y
    raise ExpressionError(f"Unsupported operator: {op!r}")


def render(expr: Expression) -> str:
    """
    Render an expression as infix text.

    Nested applications are wrapped in brackets; the outermost one and
    literals are not.

    Example:
        >>> e = Application(
        ...     Operator.MUL,
        ...     Application(Operator.ADD, Literal(1), Literal(50)),
        ...     Application(Operator.SUB, Literal(25), Literal(10)),
        ... )
        >>> render(e)
        '(1 + 50) * (25 - 10)'
    """
    if isinstance(expr, Literal):
        return str(expr.value)
    return f"{_render_operand(expr.left)} {expr.op.symbol} {_render_operand(expr.right)}"


def _render_operand(expr: Expression) -> str:
    if isinstance(expr, Literal):
        return str(expr.value)
    return f"({render(expr)})"


def leaves(expr: Expression) -> tuple[int, ...]:
    """Source numbers used by an expression, left to right."""
    if isinstance(expr, Literal):
        return (expr.value,)
    return leaves(expr.left) + leaves(expr.right)
