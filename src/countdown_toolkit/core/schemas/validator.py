"""
Schema Validation Utilities

Validates puzzle batch files before they reach the solver.

Quick structural checks run first so common mistakes get a short,
path-qualified message; the bundled JSON Schema is then applied in
strict mode to catch everything else.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
PUZZLE_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_puzzle_batch(data: Any, *, strict: bool = True) -> None:
    """
    Validate a puzzle batch document.

    Args:
        data: Parsed JSON document
        strict: If True, also validate against puzzle.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Puzzle batch must be a JSON object")

    required = ["schema_version", "puzzles"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != PUZZLE_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported puzzle schema version: {version} (expected {PUZZLE_SCHEMA_VERSION})",
            path="schema_version"
        )

    puzzles = data.get("puzzles")
    if not isinstance(puzzles, list):
        raise ValidationError("puzzles must be a list", path="puzzles")

    seen_ids: set[str] = set()
    for i, puzzle in enumerate(puzzles):
        _validate_puzzle(puzzle, f"puzzles[{i}]")
        puzzle_id = puzzle["id"]
        if puzzle_id in seen_ids:
            raise ValidationError(
                f"Duplicate puzzle id: {puzzle_id!r}",
                path=f"puzzles[{i}].id"
            )
        seen_ids.add(puzzle_id)

    if strict:
        schema = _load_schema("puzzle")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e


def _validate_puzzle(data: Any, path: str) -> None:
    """Validate a single puzzle entry."""
    if not isinstance(data, dict):
        raise ValidationError("Puzzle must be an object", path=path)

    required = ["id", "numbers", "target"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Puzzle missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )

    puzzle_id = data["id"]
    if not isinstance(puzzle_id, str) or not puzzle_id:
        raise ValidationError(
            f"Invalid puzzle id: {puzzle_id!r} (must be non-empty string)",
            path=f"{path}.id"
        )

    numbers = data["numbers"]
    if not isinstance(numbers, list):
        raise ValidationError("numbers must be a list", path=f"{path}.numbers")
    for j, n in enumerate(numbers):
        # bool is an int subclass; reject it explicitly
        if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
            raise ValidationError(
                f"Invalid source number: {n!r} (must be positive integer)",
                path=f"{path}.numbers[{j}]"
            )

    target = data["target"]
    if not isinstance(target, int) or isinstance(target, bool) or target <= 0:
        raise ValidationError(
            f"Invalid target: {target!r} (must be positive integer)",
            path=f"{path}.target"
        )
