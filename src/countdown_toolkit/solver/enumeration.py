"""
Module: solver.enumeration

Purpose:
    Enumerate the leaf orderings and split points explored by the search.

Key Functions:
    - all_splits(): Every way to cut a sequence into two non-empty halves
    - subset_permutations(): Every ordering of every subset of the numbers
    - count_subset_permutations(): Size of that enumeration

Dependencies:
    - itertools (std)

Used By:
    - solver.search: results() / solve()
    - solver.parallel: solve_parallel()
"""

from __future__ import annotations

import math
from itertools import combinations, permutations
from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def all_splits(items: Sequence[T]) -> list[tuple[tuple[T, ...], tuple[T, ...]]]:
    """
    Split a sequence at every interior point.

    Element order is kept; neither half is ever empty.

    Args:
        items: Sequence to split

    Returns:
        n-1 (prefix, suffix) pairs for a sequence of length n

    Example:
        >>> all_splits([1, 2, 3])
        [((1,), (2, 3)), ((1, 2), (3,))]
    """
    seq = tuple(items)
    return [(seq[:i], seq[i:]) for i in range(1, len(seq))]


def subset_permutations(
    numbers: Sequence[int],
    *,
    deduplicate: bool = False,
) -> Iterator[tuple[int, ...]]:
    """
    Yield every permutation of every subset of ``numbers``.

    Subsets are taken by position, so equal numbers at different
    positions are distinct items and produce repeated value tuples.
    Sizes run from 0 (the empty tuple) up to the full input.

    Args:
        numbers: Source numbers
        deduplicate: Yield each value tuple only once

    Yields:
        Tuples of source numbers, smallest subsets first

    Example:
        >>> list(subset_permutations([1, 2]))
        [(), (1,), (2,), (1, 2), (2, 1)]
    """
    items = tuple(numbers)
    seen: set[tuple[int, ...]] | None = set() if deduplicate else None

    for size in range(len(items) + 1):
        for subset in combinations(items, size):
            for ordering in permutations(subset):
                if seen is not None:
                    if ordering in seen:
                        continue
                    seen.add(ordering)
                yield ordering


def count_subset_permutations(n: int) -> int:
    """
    Number of tuples subset_permutations() yields for n distinct positions.

    Example:
        >>> count_subset_permutations(6)
        1957
    """
    return sum(math.perm(n, k) for k in range(n + 1))
