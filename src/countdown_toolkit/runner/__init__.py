"""
Module: runner

Purpose:
    Batch solving and the command line. Loads puzzle files, runs the
    solver over each puzzle, and records solutions and timing data.

Key Functions:
    - solve_batch(): Solve a puzzle batch file
    - solve_puzzle(): Solve a single Puzzle
    - main(): CLI entry point

Key Classes:
    - BatchConfig: Configuration for a batch run
    - BatchResult, PuzzleReport: Run results
    - BatchError: Exception for batch failures
    - TimingLog: Timing metrics
"""

from .config import BatchConfig
from .controller import BatchError, BatchResult, PuzzleReport, solve_batch, solve_puzzle
from .timing import TimingLog, timed_phase

__all__ = [
    "BatchConfig",
    "BatchError",
    "BatchResult",
    "PuzzleReport",
    "solve_batch",
    "solve_puzzle",
    "TimingLog",
    "timed_phase",
]
