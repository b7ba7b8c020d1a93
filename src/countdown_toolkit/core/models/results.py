"""
Module: results

Purpose:
    Provides the Result dataclass - an expression paired with its value.
    The value is always recomputable from the expression but is carried
    alongside it so the search never re-evaluates a sub-tree.

Key Classes:
    - Result: (expression, value) pair

Dependencies:
    - dataclasses (std)
    - .expressions

Used By:
    - solver.search: results() / solve()
"""

from __future__ import annotations

from dataclasses import dataclass

from .expressions import Expression, Literal


@dataclass(frozen=True, slots=True)
class Result:
    """
    An expression together with its cached value.

    Attributes:
        expression: Expression tree
        value: Value of ``expression``

    Invariants:
        - value == evaluate(expression)
        - value > 0

    Example:
        >>> Result.leaf(7)
        Result(7, 7)
    """

    expression: Expression
    value: int

    @classmethod
    def leaf(cls, value: int) -> Result:
        """Result for a single source number."""
        return cls(expression=Literal(value), value=value)

    def __repr__(self) -> str:
        return f"Result({self.expression}, {self.value})"
