#! /usr/bin/env python
"""
Closed knight's tour. Randomized Warnsdorff with restarts, so a run can
come back empty even when a tour exists; try more attempts or another seed.

    ./knight_tour.py --start b2 --seed 7
    ./knight_tour.py --start 1,1 --size 6 --renderer textual
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from board_state import BOARD_SIZE, InvalidStartError
from position import Position, parse_position
from render_tour import FRAME_DELAY, ConsoleRenderer, TourBoardApp
from tour_driver import MAX_ATTEMPTS, TourConfig, TourDriver, is_closed_tour

LOG_LEVEL = logging.WARNING
logger = logging.getLogger()

INITIAL_POS = Position(1, 1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find and show a closed knight's tour.")
    parser.add_argument(
        "--start",
        default=INITIAL_POS.to_algebraic(),
        help="Starting cell, algebraic (b2) or row,col (1,1)",
    )
    parser.add_argument("--size", type=int, default=BOARD_SIZE, help="Board size N")
    parser.add_argument(
        "--attempts",
        type=int,
        default=MAX_ATTEMPTS,
        help="Restarts before giving up",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the tie-break generator"
    )
    parser.add_argument(
        "--delay", type=float, default=FRAME_DELAY, help="Seconds between frames"
    )
    parser.add_argument(
        "--renderer",
        choices=("console", "textual", "none"),
        default="console",
        help="How to show the tour",
    )
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(LOG_LEVEL),
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s:%(name)s:%(message)s"
    )

    try:
        start = parse_position(args.start)
        config = TourConfig(board_size=args.size, max_attempts=args.attempts)
    except ValueError as err:
        parser.error(str(err))

    # one generator for the whole process, seeded once
    rng = random.Random(args.seed)
    logger.info(
        "Searching from %s on a %dx%d board", start, config.board_size, config.board_size
    )
    try:
        result = TourDriver(config, rng).run(start)
    except InvalidStartError as err:
        parser.error(str(err))

    if args.renderer == "console":
        ConsoleRenderer(config.board_size, args.delay).render(start, result.path)
    elif args.renderer == "textual":
        TourBoardApp(start, result.path, config.board_size, args.delay).run()

    if not result.found:
        print(f"Did we close the tour? No, gave up after {result.attempts} attempts")
        return 1
    if not is_closed_tour(start, result.path, config.board_size):
        logger.error("Path from %s is not a closed tour: %s", start, result.path)
        return 1
    print(f"Solution: {[p.as_tuple() for p in result.path]}")
    print(f"Did we close the tour? Yes, on attempt {result.attempts}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
