"""
Module: solver.search

Purpose:
    Exhaustive search for expressions that reach a target. Builds every
    admissible expression over each subset-permutation of the source
    numbers and keeps those whose value equals the target.

Key Functions:
    - results(): All admissible Results for one ordered leaf sequence
    - solutions_for(): Matching expressions for one leaf sequence
    - solve(): Main entry point

Algorithm:
    For a leaf sequence, try every split point; combine every result of
    the left half with every result of the right half under every
    operator admitted by valid_combination(). Sub-expressions are shared
    between the candidates built on them, never copied.

Dependencies:
    - core.models: Operator rules, Expression, Result
    - solver.enumeration: all_splits, subset_permutations
    - solver.config: SolverConfig

Used By:
    - runner.controller: Batch solving
    - runner.cli: Command line
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence

from countdown_toolkit.core.models import (
    Application,
    Expression,
    Result,
    apply,
    valid_combination,
)
from countdown_toolkit.core.models.operators import OPERATORS

from .config import SolverConfig
from .enumeration import all_splits, subset_permutations

logger = logging.getLogger(__name__)


def results(numbers: Sequence[int]) -> Iterator[Result]:
    """
    Yield every admissible Result whose leaves are ``numbers`` in order.

    Args:
        numbers: Ordered leaf sequence

    Yields:
        Result objects; none for an empty sequence, and none for a
        singleton holding a non-positive number

    Example:
        >>> sorted(r.value for r in results([2, 3]))
        [5, 6]
    """
    items = tuple(numbers)
    if not items:
        return
    if len(items) == 1:
        if items[0] > 0:
            yield Result.leaf(items[0])
        return

    for left, right in all_splits(items):
        # Right side is reused for every left result
        right_results = list(results(right))
        if not right_results:
            continue
        for lx in results(left):
            for ry in right_results:
                for op in OPERATORS:
                    if valid_combination(op, lx.value, ry.value):
                        yield Result(
                            Application(op, lx.expression, ry.expression),
                            apply(op, lx.value, ry.value),
                        )


def solutions_for(numbers: Sequence[int], target: int) -> List[Expression]:
    """
    Expressions over exactly ``numbers`` (in order) that equal ``target``.

    Args:
        numbers: Ordered leaf sequence
        target: Value to reach

    Returns:
        Matching expressions, possibly empty
    """
    return [r.expression for r in results(numbers) if r.value == target]


def solve(
    numbers: Sequence[int],
    target: int,
    *,
    config: Optional[SolverConfig] = None,
) -> List[Expression]:
    """
    Find every expression over the source numbers that equals ``target``.

    Each source number is used at most once. No de-duplication happens
    across different subset-permutations, so equivalent expressions
    with different leaf orders may all appear.

    Args:
        numbers: Source numbers (non-positive values never become leaves)
        target: Value to reach
        config: Execution settings (default: sequential, unlimited)

    Returns:
        Matching expressions; order is deterministic only when sequential

    Example:
        >>> from countdown_toolkit.core.models import render
        >>> [render(e) for e in solve([2, 3], 6)]
        ['2 * 3']
    """
    config = config or SolverConfig()
    numbers = tuple(numbers)

    excluded = [n for n in numbers if n <= 0]
    if excluded:
        logger.warning(f"Non-positive source numbers will never be used: {excluded}")

    if config.parallel:
        from .parallel import solve_parallel
        return solve_parallel(numbers, target, config)

    solutions: List[Expression] = []
    candidates = 0
    for candidate in subset_permutations(
        numbers, deduplicate=config.deduplicate_permutations
    ):
        candidates += 1
        found = solutions_for(candidate, target)
        if not found:
            continue
        logger.debug(f"{candidate}: {len(found)} solution(s)")
        solutions.extend(found)
        if config.max_solutions is not None and len(solutions) >= config.max_solutions:
            logger.info(f"Stopping at {config.max_solutions} solutions")
            del solutions[config.max_solutions:]
            break

    logger.debug(
        f"Searched {candidates} subset-permutations of {list(numbers)} for {target}: "
        f"{len(solutions)} solution(s)"
    )
    return solutions
