from typing import List

from board_state import BoardState
from position import Position


class MoveGenerator:
    """
    Read-only queries on a board. Used for the real move from the current
    cell and for the lookahead from each candidate, both against the
    visited set as it is now (the candidate is not committed yet).
    """

    def candidate_moves(self, board: BoardState, origin: Position) -> List[Position]:
        return board.candidate_moves(origin)

    def degree(self, board: BoardState, cell: Position) -> int:
        return len(self.candidate_moves(board, cell))
