"""
Module: solver

Purpose:
    Exhaustive countdown numbers-game search. Enumerates every
    admissible expression over the source numbers and keeps those that
    reach the target.

Key Functions:
    - solve(): Main entry point
    - results(): Admissible results for one ordered leaf sequence
    - all_splits(), subset_permutations(): Search-space enumeration

Key Classes:
    - SolverConfig: Execution settings
    - SearchPool: Parallel fan-out over subset-permutations

Dependencies:
    - countdown_toolkit.core.models: Expression, Result, Operator rules

Used By:
    - countdown_toolkit.runner: Batch controller and CLI
"""

from .config import SolverConfig
from .enumeration import all_splits, subset_permutations, count_subset_permutations
from .search import results, solutions_for, solve
from .parallel import SearchPool, solve_parallel

__all__ = [
    "SolverConfig",
    "all_splits",
    "subset_permutations",
    "count_subset_permutations",
    "results",
    "solutions_for",
    "solve",
    "SearchPool",
    "solve_parallel",
]
