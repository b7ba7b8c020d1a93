"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_puzzle_batch,
    ValidationError,
    PUZZLE_SCHEMA_VERSION,
)

__all__ = [
    "validate_puzzle_batch",
    "ValidationError",
    "PUZZLE_SCHEMA_VERSION",
]
