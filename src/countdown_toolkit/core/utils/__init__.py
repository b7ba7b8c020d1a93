"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_expression,
    deserialize_expression,
    expression_to_json,
    expression_from_json,
    load_puzzles_json,
    save_puzzles_json,
)

__all__ = [
    "serialize_expression",
    "deserialize_expression",
    "expression_to_json",
    "expression_from_json",
    "load_puzzles_json",
    "save_puzzles_json",
]
