"""
Countdown Toolkit Core Package

Data models, schema validation and serialization shared by the solver
and the batch runner.
"""

from .models import (
    Operator,
    Expression,
    Literal,
    Application,
    ExpressionError,
    Result,
    evaluate,
    render,
)

__all__ = [
    "Operator",
    "Expression",
    "Literal",
    "Application",
    "ExpressionError",
    "Result",
    "evaluate",
    "render",
]
