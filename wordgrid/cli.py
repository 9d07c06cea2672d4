"""Terminal mode: read a grid from stdin and print every word found on it."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from wordgrid.dictionary import load_trie
from wordgrid.metrics import SearchStats, StageTimer
from wordgrid.settings import settings
from wordgrid.solver import MIN_WORD_LENGTH, GridShapeError, solve, solve_parallel

logger = logging.getLogger("wordgrid")


def read_grid(stream: TextIO, size: int) -> list[list[str]]:
    """Read ``size`` lines, dropping whitespace and lowercasing the letters."""
    grid = []
    for _ in range(size):
        line = stream.readline()
        if not line:
            raise GridShapeError(f"Not enough lines: expected {size}, got {len(grid)}")
        grid.append([ch.lower() for ch in line if not ch.isspace()])
    return grid


def _min_length(value: str) -> int:
    length = int(value)
    if length < MIN_WORD_LENGTH:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_WORD_LENGTH}, got {length}")
    return length


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordgrid", description="Find every word on a letter grid.")
    parser.add_argument("--dictionary", default=str(settings.DICTIONARY_PATH),
                        help="word list, one word per line (default: %(default)s)")
    parser.add_argument("--size", type=int, default=settings.GRID_SIZE, help="grid dimension")
    parser.add_argument("--workers", type=int, default=settings.SEARCH_WORKERS,
                        help="threads to spread starting cells over")
    parser.add_argument("--min-length", type=_min_length, default=max(settings.MIN_WORD_LENGTH, MIN_WORD_LENGTH),
                        help=f"shortest word to report (at least {MIN_WORD_LENGTH})")
    parser.add_argument("--verbose", "-v", action="store_true", help="log timings and search counters")
    parser.add_argument("--serve", action="store_true", help="run the HTTP service instead")
    return parser


def run_cli(args: argparse.Namespace, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    timer = StageTimer()
    stats = SearchStats()

    try:
        with timer.stage("load"):
            trie = load_trie(args.dictionary)
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Input the grid on {args.size} lines", file=stdout)
    try:
        grid = read_grid(stdin, args.size)
        with timer.stage("solve"):
            if args.workers > 1:
                words = solve_parallel(grid, trie, args.size, args.workers, args.min_length, stats)
            else:
                words = solve(grid, trie, args.size, args.min_length, stats)
    except GridShapeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info("Found %d words in %.1fms, %s", len(words), timer.total_ms, stats.as_dict())
    print("Found the following words", file=stdout)
    print("\n".join(words), file=stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.serve:
        import uvicorn
        uvicorn.run("wordgrid.server:app", host="0.0.0.0", port=settings.PORT)
        return 0
    return run_cli(args)
