"""
Module: operators

Purpose:
    Arithmetic operators of the numbers game and the admissibility rule
    that decides which operator applications are explored by the search.

Key Functions:
    - valid_combination(op, x, y): Admissibility + canonical ordering check
    - apply(op, x, y): Integer result of an admissible application

Key Classes:
    - Operator: The four game operators

Dependencies:
    - enum (std)

Used By:
    - core.models.expressions: Application nodes and evaluation
    - solver.search: Combining sub-results
"""

from __future__ import annotations

from enum import Enum


class Operator(Enum):
    """
    The four arithmetic operators allowed in the numbers game.

    The enum value is the symbol used when rendering expressions.

    Example:
        >>> Operator.MUL.symbol
        '*'
        >>> Operator.from_symbol("-")
        <Operator.SUB: '-'>
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        """Display symbol."""
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """
        Look up an operator by its symbol.

        Raises:
            ValueError: If symbol is not one of + - * /
        """
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown operator symbol: {symbol!r}") from None


def valid_combination(op: Operator, x: int, y: int) -> bool:
    """
    Decide whether ``op`` applied to ``(x, y)`` is worth exploring.

    Besides keeping every result a positive integer, the rule admits only
    one ordering of commutative operations and rejects identity
    multiplication and division, so symmetric duplicates are never built.

    Args:
        op: Operator to apply
        x: Left operand (positive)
        y: Right operand (positive)

    Returns:
        True if the application is admissible

    Example:
        >>> valid_combination(Operator.ADD, 2, 3)
        True
        >>> valid_combination(Operator.ADD, 3, 2)
        False
        >>> valid_combination(Operator.DIV, 7, 2)
        False
    """
    if op is Operator.ADD:
        return x <= y
    if op is Operator.SUB:
        return x > y
    if op is Operator.MUL:
        return x != 1 and y != 1 and x <= y
    if op is Operator.DIV:
        return y != 1 and x % y == 0
    raise ValueError(f"Unsupported operator: {op!r}")


def apply(op: Operator, x: int, y: int) -> int:
    """
    Apply ``op`` to ``(x, y)``.

    Division is integer division; callers only divide once
    ``valid_combination`` has confirmed it is exact.
    """
    if op is Operator.ADD:
        return x + y
    if op is Operator.SUB:
        return x - y
    if op is Operator.MUL:
        return x * y
    if op is Operator.DIV:
        return x // y
    raise ValueError(f"Unsupported operator: {op!r}")


# Iteration order used when combining sub-results
OPERATORS: tuple[Operator, ...] = (Operator.ADD, Operator.SUB, Operator.MUL, Operator.DIV)
