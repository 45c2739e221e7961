from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional, Sequence

from board import Board, BoardError
from config import CFG
from pieces import default_pieces
from placements import Placement
from solver import PiecePool, solve

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    today = date.today()
    parser = argparse.ArgumentParser(
        description="Enumerate every tiling of the calendar puzzle board for a date."
    )
    parser.add_argument("month", type=int, nargs="?", default=today.month, help="month number, 1-12 (default: today)")
    parser.add_argument("day", type=int, nargs="?", default=today.day, help="day of month, 1-31 (default: today)")
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=not CFG.SHOW_SOLUTIONS,
        help="only print the number of solutions",
    )
    parser.add_argument(
        "--no-pieces",
        action="store_true",
        default=not CFG.SHOW_PIECES,
        help="skip the piece catalogue",
    )
    parser.add_argument("--progress-every", type=int, default=CFG.PROGRESS_EVERY, help="log every N solutions (0 disables)")
    parser.add_argument("--log-level", default=CFG.LOG_LEVEL, help="logging level (default: %(default)s)")
    return parser


def run(month: int, day: int, show_solutions: bool = True, show_pieces: bool = True, progress_every: int = 0) -> int:
    board = Board(month, day)
    print(f"Today's board is {board}")

    pieces = default_pieces()
    if show_pieces:
        print("Available blocks")
        for piece in pieces:
            print(piece.posed())

    total_solution = 0

    def on_solution(solution: Board, placements: Sequence[Placement]) -> None:
        nonlocal total_solution
        total_solution += 1
        if show_solutions:
            print(f"Solution:{solution}")
        if progress_every and total_solution % progress_every == 0:
            LOGGER.info("%s solutions so far", f"{total_solution:,}")

    solve(board, PiecePool(pieces), on_solution)
    print(f"number of solutions:{total_solution}")
    return total_solution


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(levelname)s: %(message)s",
    )

    try:
        total = run(
            args.month,
            args.day,
            show_solutions=not args.quiet,
            show_pieces=not args.no_pieces,
            progress_every=max(args.progress_every, 0),
        )
    except BoardError as exc:
        parser.error(str(exc))
    except Exception:
        LOGGER.exception("Failed to solve %s/%s", args.month, args.day)
        raise SystemExit(1)

    LOGGER.info("=== DONE === %s/%s: %s solutions", args.month, args.day, f"{total:,}")


if __name__ == "__main__":
    main(sys.argv[1:])
