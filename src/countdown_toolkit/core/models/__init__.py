"""
Core Models Package

Immutable data models shared by the solver and the batch runner.

All models in this package are frozen dataclasses. This ensures:
1. Sub-expressions can be shared between many parent trees
2. Safe to pass between threads/processes
3. Can be used as dict keys or in sets
"""

from .operators import Operator, valid_combination, apply
from .expressions import (
    Expression,
    Literal,
    Application,
    ExpressionError,
    evaluate,
    render,
    leaves,
)
from .results import Result
from .puzzles import Puzzle

__all__ = [
    "Operator",
    "valid_combination",
    "apply",
    "Expression",
    "Literal",
    "Application",
    "ExpressionError",
    "evaluate",
    "render",
    "leaves",
    "Result",
    "Puzzle",
]
