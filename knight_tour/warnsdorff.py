"""
Warnsdorff's rule: jump to the cell that has the fewest onward moves.
Ties are broken with the injected random generator so restarts explore
different tours.
"""

import logging
import random
from typing import List, Optional, Tuple

from board_state import BoardState
from move_generator import MoveGenerator
from position import Position

logger = logging.getLogger(__name__)


class WarnsdorffSelector:
    def __init__(
        self, rng: random.Random, generator: Optional[MoveGenerator] = None
    ) -> None:
        self.rng = rng
        self.generator = generator or MoveGenerator()

    def ranked_candidates(self, board: BoardState) -> List[Tuple[Position, int]]:
        """Candidates from the current cell with their onward degree, ascending."""
        moves = []
        for cell in self.generator.candidate_moves(board, board.current):
            moves.append((cell, self.generator.degree(board, cell)))
        return sorted(moves, key=lambda x: x[-1])

    def best_moves(self, board: BoardState) -> List[Position]:
        ranked = self.ranked_candidates(board)
        if not ranked:
            return []
        min_degree = ranked[0][1]
        return [cell for cell, degree in ranked if degree == min_degree]

    def select(self, board: BoardState) -> Optional[Position]:
        """Pick the next cell, or None when the knight is stuck."""
        best = self.best_moves(board)
        if not best:
            return None
        if len(best) > 1:
            logger.debug("Tie between %d cells from %s", len(best), board.current)
        return self.rng.choice(best)
