"""
Module: solver.parallel

Purpose:
    Parallel fan-out of the search over subset-permutations. Every
    subset-permutation is independent, so chunks of them are handed to
    a thread or process pool and the matches are concatenated.

Key Classes:
    - SearchPool: Reusable executor-backed search pool

Key Functions:
    - solve_parallel(): One-shot parallel solve

Dependencies:
    - concurrent.futures: Thread/process pool execution
    - common.logging_utils: Worker-process log forwarding

Used By:
    - solver.search: solve() when SolverConfig.parallel is set
    - runner.controller: One pool shared across a batch
"""

from __future__ import annotations

import logging
import multiprocessing
from concurrent.futures import (
    Executor,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from itertools import islice
from logging.handlers import QueueListener
from typing import Iterable, Iterator, List, Optional, Sequence

from countdown_toolkit.common.logging_utils import (
    configure_worker_logging,
    start_log_listener,
)
from countdown_toolkit.core.models import Expression

from .config import SolverConfig
from .enumeration import subset_permutations
from .search import solutions_for

logger = logging.getLogger(__name__)


class SearchPool:
    """
    Executor-backed pool that searches subset-permutations in parallel.

    The pool outlives a single solve so a batch of puzzles can share
    its workers.

    Usage:
        with SearchPool(SolverConfig(parallel=True, max_workers=4)) as pool:
            for puzzle in puzzles:
                found = pool.solve(puzzle.numbers, puzzle.target)

    Attributes:
        config: Solver configuration (executor kind, workers, chunking)
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        """
        Initialize the pool.

        Args:
            config: Solver configuration. ``parallel`` is implied.
        """
        self.config = config or SolverConfig(parallel=True)
        self._listener: Optional[QueueListener] = None
        self._executor = self._create_executor()

    def _create_executor(self) -> Executor:
        if self.config.executor == "process":
            log_queue = multiprocessing.Queue()
            self._listener = start_log_listener(log_queue)
            return ProcessPoolExecutor(
                max_workers=self.config.max_workers,
                initializer=configure_worker_logging,
                initargs=(log_queue, logging.getLogger().getEffectiveLevel()),
            )
        return ThreadPoolExecutor(max_workers=self.config.max_workers)

    def solve(self, numbers: Sequence[int], target: int) -> List[Expression]:
        """
        Find every expression over ``numbers`` equal to ``target``.

        Args:
            numbers: Source numbers
            target: Value to reach

        Returns:
            Matching expressions in completion order
        """
        numbers = tuple(numbers)
        candidates = subset_permutations(
            numbers, deduplicate=self.config.deduplicate_permutations
        )
        futures: List[Future] = [
            self._executor.submit(_solve_chunk, chunk, target)
            for chunk in _chunked(candidates, self.config.chunk_size)
        ]
        logger.debug(f"Submitted {len(futures)} chunk(s) for {list(numbers)} -> {target}")

        limit = self.config.max_solutions
        solutions: List[Expression] = []
        try:
            for future in as_completed(futures):
                solutions.extend(future.result())
                if limit is not None and len(solutions) >= limit:
                    logger.info(f"Stopping at {limit} solutions")
                    break
        finally:
            for future in futures:
                future.cancel()

        if limit is not None:
            del solutions[limit:]
        return solutions

    def shutdown(self) -> None:
        """Shutdown the executor and stop log forwarding."""
        self._executor.shutdown(wait=True)
        if self._listener is not None:
            self._listener.stop()
            self._listener = None

    def __enter__(self) -> "SearchPool":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()


def solve_parallel(
    numbers: Sequence[int],
    target: int,
    config: Optional[SolverConfig] = None,
) -> List[Expression]:
    """
    Solve one puzzle on a temporary pool.

    The set of expressions returned equals the sequential solve();
    only the order differs.
    """
    with SearchPool(config) as pool:
        return pool.solve(numbers, target)


def _solve_chunk(chunk: Sequence[tuple[int, ...]], target: int) -> List[Expression]:
    """Worker task: search a chunk of subset-permutations."""
    found: List[Expression] = []
    for candidate in chunk:
        found.extend(solutions_for(candidate, target))
    logger.debug(
        f"Searched chunk {chunk[0]}..{chunk[-1]} ({len(chunk)} candidate(s)) "
        f"for {target}: {len(found)} solution(s)"
    )
    return found


def _chunked(items: Iterable[tuple[int, ...]], size: int) -> Iterator[List[tuple[int, ...]]]:
    """Group an iterable into lists of at most ``size`` items."""
    iterator = iter(items)
    while True:
        chunk = list(islice(iterator, size))
        if not chunk:
            return
        yield chunk
