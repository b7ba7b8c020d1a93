"""
Module: runner.config

Purpose:
    Configuration dataclass for batch solving. Immutable configuration
    with validation on construction.

Key Classes:
    - BatchConfig: Main configuration for a batch run

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - runner.controller: solve_batch()
    - runner.cli: batch subcommand
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from countdown_toolkit.solver.config import SolverConfig


@dataclass(frozen=True)
class BatchConfig:
    """
    Configuration for solving a batch file (immutable).

    Attributes:
        puzzles_path: JSON batch file to read
        output_path: JSONL file that receives one record per puzzle
        timing_path: Optional JSON file for timing data (merged, locked)
        solver: Solver execution settings
        strict: Apply full JSON Schema validation to the batch file
        overwrite: Truncate output_path before writing; otherwise append

    Example:
        >>> config = BatchConfig(
        ...     puzzles_path=Path("puzzles.json"),
        ...     output_path=Path("out/solutions.jsonl"),
        ... )
    """

    # Required
    puzzles_path: Path
    output_path: Path

    # Optional outputs
    timing_path: Optional[Path] = None

    # Behaviour
    solver: SolverConfig = field(default_factory=SolverConfig)
    strict: bool = True
    overwrite: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.puzzles_path == self.output_path:
            raise ValueError(f"output_path must differ from puzzles_path: {self.output_path}")
        if self.timing_path is not None and self.timing_path == self.output_path:
            raise ValueError(f"timing_path must differ from output_path: {self.timing_path}")
