"""
Module: runner.controller

Purpose:
    Orchestrate solving a batch of puzzles.
    Load → Validate → Solve each puzzle → Write JSONL → Save timing

Key Functions:
    - solve_batch(): Main entry point for a batch run
    - solve_puzzle(): Solve a single puzzle into a PuzzleReport

Key Classes:
    - PuzzleReport: Solutions for one puzzle
    - BatchResult: Complete batch result
    - BatchError: Exception for batch failures

Dependencies:
    - core.utils.serialization: Puzzle loading
    - solver: solve(), SearchPool
    - runner.file_locking: Locked JSONL output
    - runner.timing: Timing metrics

Used By:
    - runner.cli: batch subcommand
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from countdown_toolkit.core.models import Expression, Puzzle, render
from countdown_toolkit.core.schemas import ValidationError
from countdown_toolkit.core.utils.serialization import load_puzzles_json
from countdown_toolkit.solver import SearchPool, SolverConfig, solve

from .config import BatchConfig
from .file_locking import locked_append_jsonl
from .timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)


class BatchError(Exception):
    """Error during batch solving."""
    pass


@dataclass(frozen=True)
class PuzzleReport:
    """
    Solutions found for one puzzle (immutable).

    Attributes:
        puzzle: The puzzle solved
        solutions: Matching expressions
        elapsed: Search time in seconds
    """
    puzzle: Puzzle
    solutions: tuple[Expression, ...]
    elapsed: float

    @property
    def solution_count(self) -> int:
        """Number of expressions found."""
        return len(self.solutions)

    @property
    def is_solved(self) -> bool:
        """True if at least one expression reaches the target."""
        return bool(self.solutions)

    def to_record(self) -> Dict[str, Any]:
        """JSONL record written for this puzzle."""
        return {
            "id": self.puzzle.id,
            "numbers": list(self.puzzle.numbers),
            "target": self.puzzle.target,
            "solution_count": self.solution_count,
            "solutions": [render(e) for e in self.solutions],
            "elapsed": round(self.elapsed, 6),
        }


@dataclass(frozen=True)
class BatchResult:
    """
    Complete batch result (immutable).

    Attributes:
        output_path: JSONL file written
        timing_path: Timing JSON file (if requested)
        reports: One PuzzleReport per puzzle, in file order
        metadata: Run metadata dictionary
        warnings: Any warnings during the run

    Example:
        >>> result = solve_batch(config)
        >>> print(f"Solved {result.solved_count}/{result.puzzle_count}")
    """
    output_path: Path
    timing_path: Optional[Path]
    reports: tuple[PuzzleReport, ...]
    metadata: dict
    warnings: tuple[str, ...]

    @property
    def puzzle_count(self) -> int:
        return len(self.reports)

    @property
    def solved_count(self) -> int:
        return sum(1 for r in self.reports if r.is_solved)

    @property
    def total_solutions(self) -> int:
        return sum(r.solution_count for r in self.reports)


def solve_puzzle(
    puzzle: Puzzle,
    config: Optional[SolverConfig] = None,
    *,
    pool: Optional[SearchPool] = None,
) -> PuzzleReport:
    """
    Solve one puzzle.

    Args:
        puzzle: Puzzle to solve
        config: Solver settings (ignored when pool is given)
        pool: Shared parallel pool to run the search on

    Returns:
        PuzzleReport with solutions and elapsed time
    """
    start = time.perf_counter()
    if pool is not None:
        solutions = pool.solve(puzzle.numbers, puzzle.target)
    else:
        solutions = solve(puzzle.numbers, puzzle.target, config=config)
    elapsed = time.perf_counter() - start

    logger.info(
        f"{puzzle.id}: {len(solutions)} solution(s) for {list(puzzle.numbers)} -> "
        f"{puzzle.target} in {elapsed:.2f}s"
    )
    return PuzzleReport(puzzle=puzzle, solutions=tuple(solutions), elapsed=elapsed)


def solve_batch(config: BatchConfig) -> BatchResult:
    """
    Solve every puzzle in a batch file.

    Pipeline:
    1. Load and validate the batch file
    2. Solve each puzzle (sequentially, or on one shared pool)
    3. Append one JSONL record per puzzle under a file lock
    4. (Optional) Merge timing data into timing_path

    Args:
        config: Batch configuration

    Returns:
        BatchResult with reports and metadata

    Raises:
        BatchError: If the batch file cannot be loaded or is invalid
    """
    warnings: List[str] = []
    timing = TimingLog()
    start_time = time.perf_counter()

    logger.info(f"Starting batch from {config.puzzles_path}")

    # 1. Load puzzles
    try:
        with timed_phase(timing, "load"):
            puzzles = load_puzzles_json(config.puzzles_path, strict=config.strict)
    except ValidationError as e:
        location = f" at {e.path}" if e.path else ""
        raise BatchError(f"Invalid puzzle file{location}: {e}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise BatchError(f"Failed to load puzzles: {e}") from e

    if not puzzles:
        warnings.append(f"No puzzles in {config.puzzles_path}")
        logger.warning(warnings[-1])
    logger.info(f"Loaded {len(puzzles)} puzzle(s)")

    if config.overwrite and config.output_path.exists():
        config.output_path.unlink()

    # 2-3. Solve and write
    reports: List[PuzzleReport] = []
    pool = SearchPool(config.solver) if config.solver.parallel and puzzles else None
    try:
        for puzzle in puzzles:
            with timed_phase(timing, "search", puzzle_id=puzzle.id):
                report = solve_puzzle(puzzle, config.solver, pool=pool)
            with timed_phase(timing, "write", puzzle_id=puzzle.id):
                locked_append_jsonl(config.output_path, report.to_record())
            if not report.is_solved:
                warnings.append(f"{puzzle.id}: no solution for {puzzle.target}")
            reports.append(report)
    finally:
        if pool is not None:
            pool.shutdown()

    timing.log_run("total", time.perf_counter() - start_time)

    # 4. Timing
    if config.timing_path is not None:
        timing.save(config.timing_path)
    logger.debug(timing.summary())

    metadata = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "puzzles_path": str(config.puzzles_path),
        "solver": config.solver.to_dict(),
        "elapsed": round(timing.run_timings["total"], 6),
    }

    result = BatchResult(
        output_path=config.output_path,
        timing_path=config.timing_path,
        reports=tuple(reports),
        metadata=metadata,
        warnings=tuple(warnings),
    )
    logger.info(
        f"Batch complete: {result.solved_count}/{result.puzzle_count} solved, "
        f"{result.total_solutions} expression(s) written to {config.output_path}"
    )
    return result
