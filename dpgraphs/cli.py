"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from dpgraphs.grids import largest_square

__all__ = ["main"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dpgraphs")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("hello", help="print a greeting")
    square = commands.add_parser(
        "square", help="side of the largest square of non-zero cells in an n x n grid"
    )
    square.add_argument(
        "--input", type=Path, help="file holding n and the grid (default: standard input)"
    )
    return parser


def _read_square_grid(text: str) -> list[list[int]]:
    tokens = text.split()
    if not tokens:
        raise ValueError("expected the grid size n")
    size = int(tokens[0])
    if size < 0:
        raise ValueError(f"grid size must not be negative, got {size}")
    values = [int(token) for token in tokens[1 : 1 + size * size]]
    if len(values) < size * size:
        raise ValueError(f"expected {size * size} grid values, got {len(values)}")
    return [values[row * size : (row + 1) * size] for row in range(size)]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv``; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "hello":
        print("hello world :)", end="")
        return 0

    try:
        text = args.input.read_text() if args.input else sys.stdin.read()
    except OSError as error:
        parser.error(str(error))
    try:
        grid = _read_square_grid(text)
    except ValueError as error:
        parser.error(str(error))

    started = time.perf_counter_ns()
    side = largest_square(grid)
    elapsed = (time.perf_counter_ns() - started) // 1000
    print(f"Maximum Square Side Length: {side}")
    print(f"Time Taken: {elapsed} microseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())