"""
Module: solver.config

Purpose:
    Configuration dataclass for the solver.
    Immutable configuration with validation on construction.

Key Classes:
    - SolverConfig: Execution settings for solve()

Dependencies:
    - dataclasses (std)

Used By:
    - solver.search: solve()
    - solver.parallel: solve_parallel()
    - runner.config: BatchConfig
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional

ExecutorKind = Literal["thread", "process"]


@dataclass(frozen=True)
class SolverConfig:
    """
    Configuration for a solve run (immutable).

    None of these settings change which expressions are valid; they
    control how the search is executed and how much of it is collected.

    Attributes:
        parallel: Fan the subset-permutations out to a worker pool
        max_workers: Pool size (None = executor default)
        executor: "thread" or "process" pool
        chunk_size: Subset-permutations handed to a worker per task
        max_solutions: Stop once this many expressions are collected
        deduplicate_permutations: Skip subset-permutations whose values
            repeat an earlier one (only matters with repeated numbers)

    Invariants:
        - max_workers is None or max_workers >= 1
        - chunk_size >= 1
        - max_solutions is None or max_solutions >= 1

    Example:
        >>> config = SolverConfig(parallel=True, max_workers=4)
        >>> config.is_limited
        False
    """

    # Execution
    parallel: bool = False
    max_workers: Optional[int] = None
    executor: ExecutorKind = "thread"
    chunk_size: int = 64

    # Collection
    max_solutions: Optional[int] = None
    deduplicate_permutations: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1: {self.max_workers}")
        if self.executor not in ("thread", "process"):
            raise ValueError(f"executor must be 'thread' or 'process': {self.executor!r}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1: {self.chunk_size}")
        if self.max_solutions is not None and self.max_solutions < 1:
            raise ValueError(f"max_solutions must be >= 1: {self.max_solutions}")

    @property
    def is_limited(self) -> bool:
        """True if collection stops early at max_solutions."""
        return self.max_solutions is not None

    def to_dict(self) -> dict[str, Any]:
        """Settings as a plain dictionary (for run metadata)."""
        return {
            "parallel": self.parallel,
            "max_workers": self.max_workers,
            "executor": self.executor,
            "chunk_size": self.chunk_size,
            "max_solutions": self.max_solutions,
            "deduplicate_permutations": self.deduplicate_permutations,
        }
