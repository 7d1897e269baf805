#!/usr/bin/env python3
from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from typing import List, Optional

from slidingtile.errors import InputError, InvariantViolation
from slidingtile.puzzle_io.loader import load_grid
from slidingtile.puzzle_io.report import UNSOLVABLE_MESSAGE, write_report
from slidingtile.search.a_star import a_star
from slidingtile.search.frontier import TIE_BREAKS
from slidingtile.search.path import replay

EXIT_SOLVED, EXIT_UNSOLVABLE, EXIT_BAD_INPUT = 0, 1, 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve an N×N sliding-tile puzzle with A* + Manhattan distance")
    ap.add_argument("input", nargs="?", type=Path, default=Path("input.txt"),
                    help="Board file: N, then N rows of N integers (0 = blank)")
    ap.add_argument("-o", "--out", type=Path, default=Path("output.txt"), help="Move report destination")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--check", action="store_true", help="Replay the moves and verify the goal is reached")
    ap.add_argument("--stats", action="store_true", help="Print search counters")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        start = load_grid(args.input)
    except InputError as e:
        print(f"Error: Entered state is invalid! {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # start from an empty report so a stale solution is never left behind
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text("")

    res = a_star(start, tie_break=args.tie_break)
    if not res.solved:
        print(UNSOLVABLE_MESSAGE)
        return EXIT_UNSOLVABLE

    write_report(res.steps, args.out)
    if args.check and not replay(start, res.moves).is_goal():
        raise InvariantViolation("replayed move list does not reach the goal")

    print(f"Solved in {res.g} moves -> {args.out}")
    if args.stats:
        for k, v in res.to_row().items():
            print(f"  {k:<12} {v}")
    return EXIT_SOLVED


if __name__ == "__main__":
    sys.exit(main())
