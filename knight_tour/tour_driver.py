"""
Closed knight's tour by randomized Warnsdorff with bounded restarts.

Each attempt starts from a fresh board and follows the heuristic until the
knight has nowhere left to go. At that point the attempt is a success only
if every cell was visited and the knight can jump back to the start;
otherwise the board is thrown away and the next attempt begins.
The algorithm is probabilistic: running out of attempts does not prove
that no closed tour exists.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from board_state import BOARD_SIZE, BoardState, InvalidStartError
from position import Position, is_knight_move
from warnsdorff import WarnsdorffSelector

MAX_ATTEMPTS = 10000

logger = logging.getLogger(__name__)


class TourOutcome(Enum):
    found = 0
    exhausted = 1


@dataclass
class TourConfig:
    board_size: int = BOARD_SIZE
    max_attempts: int = MAX_ATTEMPTS

    def __post_init__(self):
        if self.board_size < 1:
            raise ValueError(f"Board size must be positive, got {self.board_size}")
        if self.max_attempts < 1:
            raise ValueError(
                f"max_attempts must be a positive integer, got {self.max_attempts}"
            )


@dataclass
class TourResult:
    start: Position
    outcome: TourOutcome
    attempts: int
    path: List[Position] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.outcome == TourOutcome.found


class TourDriver:
    def __init__(self, config: Optional[TourConfig] = None, rng=None):
        self.config = config or TourConfig()
        self.rng = rng if rng is not None else random.Random()
        self.selector = WarnsdorffSelector(self.rng)

    def attempt(self, start: Position) -> List[Position]:
        """One pass from start. Returns the path, empty on a dead end."""
        board = BoardState(start, self.config.board_size)
        path: List[Position] = []
        # n*n - 1 moves, plus the last query that finds the knight stuck
        for _ in range(board.size * board.size):
            best_move = self.selector.select(board)
            if best_move is None:
                if board.is_complete() and board.can_close(start):
                    return path
                logger.debug(
                    "Dead end at %s after %d steps", board.current, board.steps
                )
                return []
            board.advance(best_move)
            path.append(best_move)
        return []

    def run(self, start: Position) -> TourResult:
        size = self.config.board_size
        if not start.is_valid(size):
            raise InvalidStartError(f"Start {start} is outside a {size}x{size} board")
        for attempt_no in range(1, self.config.max_attempts + 1):
            path = self.attempt(start)
            if path:
                logger.info(
                    "Closed tour from %s found on attempt %d", start, attempt_no
                )
                return TourResult(start, TourOutcome.found, attempt_no, path)
        logger.warning(
            "No closed tour from %s on a %dx%d board after %d attempts",
            start,
            size,
            size,
            self.config.max_attempts,
        )
        return TourResult(start, TourOutcome.exhausted, self.config.max_attempts)


def find_tour(
    start: Position,
    max_attempts: int = MAX_ATTEMPTS,
    board_size: int = BOARD_SIZE,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> List[Position]:
    """Moves after start of a closed tour, or [] when every attempt failed."""
    if rng is None:
        rng = random.Random(seed)
    driver = TourDriver(TourConfig(board_size, max_attempts), rng)
    return driver.run(start).path


def closed_cycle(start: Position, path: Sequence[Position]) -> List[Position]:
    if not path:
        return []
    return [start, *path, start]


def is_closed_tour(
    start: Position, path: Sequence[Position], board_size: int = BOARD_SIZE
) -> bool:
    cells = [start, *path]
    if not path or len(cells) != board_size * board_size:
        return False
    if any(not cell.is_valid(board_size) for cell in cells):
        return False
    if len(set(cells)) != len(cells):
        return False
    cycle = closed_cycle(start, path)
    return all(is_knight_move(a, b) for a, b in zip(cycle, cycle[1:]))
