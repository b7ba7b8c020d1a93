"""
Module: puzzles

Purpose:
    Provides the Puzzle dataclass - one numbers-game round (source
    numbers plus target) as read from a batch file.

Key Classes:
    - Puzzle: Immutable puzzle definition

Dependencies:
    - dataclasses (std)

Used By:
    - core.utils.serialization: load_puzzles_json()
    - runner.controller: solve_batch()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class Puzzle:
    """
    A single numbers-game round.

    Attributes:
        id: Unique identifier within a batch
        numbers: Source numbers in the order given
        target: Number to reach

    Example:
        >>> p = Puzzle.create("r1", [1, 3, 7, 10, 25, 50], 765)
        >>> p.numbers
        (1, 3, 7, 10, 25, 50)
    """

    id: str
    numbers: tuple[int, ...]
    target: int

    def __post_init__(self) -> None:
        """Validate puzzle on construction."""
        if not self.id:
            raise ValueError("Puzzle id must not be empty")
        if self.target <= 0:
            raise ValueError(f"target must be positive: {self.target}")

    @classmethod
    def create(cls, id: str, numbers: Sequence[int], target: int) -> Puzzle:
        """Create a puzzle from any sequence of numbers."""
        return cls(id=id, numbers=tuple(numbers), target=target)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the batch-file puzzle format."""
        return {"id": self.id, "numbers": list(self.numbers), "target": self.target}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Puzzle:
        """Deserialize from the batch-file puzzle format."""
        return cls.create(data["id"], data["numbers"], data["target"])
