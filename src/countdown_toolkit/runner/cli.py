"""
Command-line interface for the countdown solver.

    countdown-solve solve 1 3 7 10 25 50 --target 765
    countdown-solve batch puzzles.json --output solutions.jsonl --parallel
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from countdown_toolkit import __version__
from countdown_toolkit.common.logging_utils import configure_logging
from countdown_toolkit.core.models import render
from countdown_toolkit.core.utils.serialization import serialize_expression
from countdown_toolkit.solver import SolverConfig, solve

from .config import BatchConfig
from .controller import BatchError, solve_batch

logger = logging.getLogger("countdown_toolkit.cli")


def _add_solver_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", type=int, default=None, help="Stop after this many solutions")
    parser.add_argument("--parallel", action="store_true", help="Search on a worker pool")
    parser.add_argument("--workers", type=int, default=None, help="Worker count for --parallel")
    parser.add_argument("--processes", action="store_true", help="Use processes instead of threads")
    parser.add_argument("--chunk-size", type=int, default=64, help="Subset-permutations per task")
    parser.add_argument("--dedupe", action="store_true",
                        help="Skip orderings that repeat earlier values (repeated numbers)")


def _solver_config(args: argparse.Namespace) -> SolverConfig:
    return SolverConfig(
        parallel=args.parallel,
        max_workers=args.workers,
        executor="process" if args.processes else "thread",
        chunk_size=args.chunk_size,
        max_solutions=args.limit,
        deduplicate_permutations=args.dedupe,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="countdown-solve",
        description="Find every way to reach a target in the countdown numbers game",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Solve a single puzzle")
    p_solve.add_argument("numbers", type=int, nargs="*", help="Source numbers")
    p_solve.add_argument("-t", "--target", type=int, required=True, help="Target number")
    p_solve.add_argument("--json", action="store_true", help="Print solutions as JSON")
    _add_solver_arguments(p_solve)

    p_batch = sub.add_parser("batch", help="Solve every puzzle in a JSON batch file")
    p_batch.add_argument("puzzles", type=Path, help="Puzzle batch file")
    p_batch.add_argument("-o", "--output", type=Path, required=True, help="Solutions JSONL file")
    p_batch.add_argument("--timing", type=Path, default=None, help="Timing JSON file (merged)")
    p_batch.add_argument("--no-strict", action="store_true", help="Skip JSON Schema validation")
    p_batch.add_argument("--append", action="store_true", help="Append to an existing output file")
    _add_solver_arguments(p_batch)

    return parser


def _run_solve(args: argparse.Namespace) -> int:
    config = _solver_config(args)
    solutions = solve(args.numbers, args.target, config=config)

    if args.json:
        payload = {
            "numbers": args.numbers,
            "target": args.target,
            "solution_count": len(solutions),
            "solutions": [
                {"text": render(e), "tree": serialize_expression(e)}
                for e in solutions
            ],
        }
        print(json.dumps(payload, indent=2))
    else:
        for expr in solutions:
            print(f"{render(expr)} = {args.target}")

    logger.info(f"{len(solutions)} solution(s)")
    return 0


def _run_batch(args: argparse.Namespace) -> int:
    config = BatchConfig(
        puzzles_path=args.puzzles,
        output_path=args.output,
        timing_path=args.timing,
        solver=_solver_config(args),
        strict=not args.no_strict,
        overwrite=not args.append,
    )
    result = solve_batch(config)
    for warning in result.warnings:
        logger.warning(warning)
    print(f"Solved {result.solved_count}/{result.puzzle_count} puzzle(s); wrote {result.output_path}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        0 on success, 1 on invalid settings or a failed batch
        (argparse itself exits with 2 on bad arguments)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        if args.command == "solve":
            return _run_solve(args)
        return _run_batch(args)
    except (BatchError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
