"""
Module: runner.timing

Purpose:
    Timing instrumentation for batch solving, to see which puzzles and
    which phases dominate a run.

Key Classes:
    - TimingLog: Collects run-level and per-puzzle timing metrics

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - runner.file_locking: Merged saves

Used By:
    - runner.controller: Batch orchestrator
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional

from .file_locking import locked_read_modify_write_json

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Timing metrics for a batch run.

    Attributes:
        run_timings: Dict of phase_name -> duration_seconds
        puzzle_timings: Dict of puzzle_id -> {phase_name -> duration_seconds}

    Example:
        >>> log = TimingLog()
        >>> log.log_run("load", 0.004)
        >>> log.log_puzzle("r1", "search", 2.71)
        >>> print(log.summary())
    """
    run_timings: Dict[str, float] = field(default_factory=dict)
    puzzle_timings: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def log_run(self, phase: str, duration: float) -> None:
        """Log a run-level timing metric."""
        self.run_timings[phase] = duration

    def log_puzzle(self, puzzle_id: str, phase: str, duration: float) -> None:
        """Log a puzzle-level timing metric."""
        self.puzzle_timings.setdefault(puzzle_id, {})[phase] = duration

    def get_puzzle_total(self, puzzle_id: str) -> float:
        """Get total time for a puzzle."""
        return sum(self.puzzle_timings.get(puzzle_id, {}).values())

    def get_phase_averages(self) -> Dict[str, float]:
        """Calculate average time per phase across all puzzles."""
        return _phase_averages(self.puzzle_timings)

    def get_slowest_puzzles(self, n: int = 3) -> List[tuple]:
        """Get the N slowest puzzles with their total time and slowest phase."""
        return _slowest(self.puzzle_timings, n)

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Solve Timing Summary ==="]

        if self.run_timings:
            lines.append("Run-level:")
            for phase, duration in sorted(self.run_timings.items()):
                lines.append(f"  {phase:25s} {duration:.3f}s")

        averages = self.get_phase_averages()
        if averages:
            lines.append("")
            lines.append("Puzzle-level averages:")
            for phase, avg in sorted(averages.items(), key=lambda x: -x[1]):
                lines.append(f"  {phase:25s} {avg:.3f}s")

        slowest = self.get_slowest_puzzles(3)
        if slowest:
            lines.append("")
            lines.append("Slowest puzzles:")
            for pid, total, slow_phase, slow_duration in slowest:
                lines.append(f"  {pid}: {total:.3f}s ({slow_phase}: {slow_duration:.3f}s)")

        lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Export timing data as dictionary."""
        return {
            "run_timings": self.run_timings,
            "puzzle_timings": self.puzzle_timings,
            "phase_averages": self.get_phase_averages(),
            "slowest_puzzles": _slowest_records(self.puzzle_timings),
        }

    def save(self, path: Path, merge: bool = True) -> None:
        """
        Save timing data to JSON file.

        When merge=True (default), the file is locked and this run's data
        is merged into whatever other runs have already written.

        Args:
            path: Path to JSON file.
            merge: If True, merge with existing data. If False, overwrite.
        """
        if not merge:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            logger.debug(f"Saved timing data to {path}")
            return

        def merge_timing_data(existing: Dict[str, Any]) -> Dict[str, Any]:
            existing.setdefault("run_timings", {}).update(self.run_timings)
            existing.setdefault("puzzle_timings", {}).update(self.puzzle_timings)
            merged = existing["puzzle_timings"]
            existing["phase_averages"] = _phase_averages(merged)
            existing["slowest_puzzles"] = _slowest_records(merged)
            return existing

        locked_read_modify_write_json(
            path,
            merge_timing_data,
            default=lambda: {"run_timings": {}, "puzzle_timings": {}},
        )
        logger.debug(f"Merged timing data to {path}")


def _phase_averages(puzzle_timings: Dict[str, Dict[str, float]]) -> Dict[str, float]:
    phase_totals: Dict[str, float] = {}
    phase_counts: Dict[str, int] = {}
    for phases in puzzle_timings.values():
        for phase, duration in phases.items():
            phase_totals[phase] = phase_totals.get(phase, 0.0) + duration
            phase_counts[phase] = phase_counts.get(phase, 0) + 1
    return {
        phase: phase_totals[phase] / phase_counts[phase]
        for phase in phase_totals
    }


def _slowest(puzzle_timings: Dict[str, Dict[str, float]], n: int) -> List[tuple]:
    results = []
    for pid, phases in puzzle_timings.items():
        if not phases:
            continue
        slowest_phase = max(phases.items(), key=lambda x: x[1])
        results.append((pid, sum(phases.values()), slowest_phase[0], slowest_phase[1]))
    results.sort(key=lambda x: x[1], reverse=True)
    return results[:n]


def _slowest_records(puzzle_timings: Dict[str, Dict[str, float]]) -> List[Dict[str, Any]]:
    return [
        {"id": pid, "total": total, "slowest_phase": phase, "phase_duration": dur}
        for pid, total, phase, dur in _slowest(puzzle_timings, 5)
    ]


@contextmanager
def timed_phase(
    log: TimingLog,
    phase: str,
    puzzle_id: Optional[str] = None,
) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    Args:
        log: TimingLog instance to record metrics
        phase: Name of the phase being timed
        puzzle_id: If provided, records as puzzle-level metric;
                   otherwise records as run-level metric

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "search", puzzle_id="r1"):
        ...     found = solve(numbers, target)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if puzzle_id:
            log.log_puzzle(puzzle_id, phase, elapsed)
        else:
            log.log_run(phase, elapsed)
