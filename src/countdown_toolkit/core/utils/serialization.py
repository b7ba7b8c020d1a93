"""
Serialization Utilities

Provides to/from JSON utilities for expressions and puzzle batches.

Expressions serialize as nested dicts: ``{"value": n}`` for a leaf and
``{"op": "+", "left": {...}, "right": {...}}`` for an application.
Values are never stored on application nodes; they are recomputed on
load through ``evaluate``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.expressions import Application, Expression, Literal, evaluate
from ..models.operators import Operator
from ..models.puzzles import Puzzle
from ..schemas.validator import PUZZLE_SCHEMA_VERSION, validate_puzzle_batch


# ─────────────────────────────────────────────────────────────────────────────
# Expression Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_expression(expr: Expression) -> dict[str, Any]:
    """
    Serialize an expression tree to a dictionary.

    Args:
        expr: Expression to serialize

    Returns:
        Nested dictionary suitable for JSON serialization
    """
    if isinstance(expr, Literal):
        return {"value": expr.value}
    return {
        "op": expr.op.symbol,
        "left": serialize_expression(expr.left),
        "right": serialize_expression(expr.right),
    }


def deserialize_expression(data: dict[str, Any], *, validate: bool = True) -> Expression:
    """
    Deserialize an expression tree from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: If True, the rebuilt tree must evaluate under game rules

    Returns:
        Expression instance

    Raises:
        ValueError: If data cannot be parsed
        ExpressionError: If validate=True and the expression breaks the rules
    """
    expr = _deserialize_node(data, "")
    if validate:
        evaluate(expr)
    return expr


def _deserialize_node(data: Any, path: str) -> Expression:
    """Deserialize a single node recursively."""
    if not isinstance(data, dict):
        raise ValueError(f"Expression node must be an object at {path or '<root>'}")

    if "value" in data:
        value = data["value"]
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Leaf value must be an integer at {path or '<root>'}: {value!r}")
        return Literal(value)

    missing = [f for f in ("op", "left", "right") if f not in data]
    if missing:
        raise ValueError(f"Expression node missing fields {missing} at {path or '<root>'}")

    return Application(
        op=Operator.from_symbol(data["op"]),
        left=_deserialize_node(data["left"], f"{path}.left"),
        right=_deserialize_node(data["right"], f"{path}.right"),
    )


def expression_to_json(expr: Expression) -> str:
    """Serialize an expression to a compact JSON string."""
    return json.dumps(serialize_expression(expr), separators=(",", ":"))


def expression_from_json(text: str, *, validate: bool = True) -> Expression:
    """Deserialize an expression from a JSON string."""
    return deserialize_expression(json.loads(text), validate=validate)


# ─────────────────────────────────────────────────────────────────────────────
# Puzzle Batch Serialization
# ─────────────────────────────────────────────────────────────────────────────

def load_puzzles_json(path: Path, *, strict: bool = True) -> list[Puzzle]:
    """
    Load and validate a puzzle batch file.

    Args:
        path: Path to JSON batch file
        strict: Apply full JSON Schema validation

    Returns:
        Puzzles in file order

    Raises:
        ValidationError: If the document is invalid
        json.JSONDecodeError: If the file is not JSON
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    validate_puzzle_batch(data, strict=strict)
    return [Puzzle.from_dict(p) for p in data["puzzles"]]


def save_puzzles_json(puzzles: list[Puzzle], path: Path) -> None:
    """Write puzzles as a batch file accepted by load_puzzles_json()."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "schema_version": PUZZLE_SCHEMA_VERSION,
        "puzzles": [p.to_dict() for p in puzzles],
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
