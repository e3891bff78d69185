"""
Mutable per-attempt board. Visited cells are kept in an int bitboard,
bit index row * size + col.
"""

from typing import Iterator, List, Optional

from position import KNIGHT_OFFSETS, Position, is_knight_move

BOARD_SIZE = 8


class InvalidStartError(ValueError):
    pass


class IllegalMoveError(ValueError):
    pass


def iter_bits(mask: int):
    while mask:
        lsb = mask & -mask  # isolate lowest set bit
        idx = lsb.bit_length() - 1
        yield idx
        mask ^= lsb


class BoardState:
    def __init__(self, start: Position, board_size: int = BOARD_SIZE):
        if board_size < 1:
            raise ValueError(f"Board size must be positive, got {board_size}")
        if not start.is_valid(board_size):
            raise InvalidStartError(
                f"Start {start} is outside a {board_size}x{board_size} board"
            )
        self.size = board_size
        self.start = start
        self.current = start
        self.traversed = 0
        self.steps = 0
        self._mark(start)

    def _mark(self, pos: Position) -> None:
        self.current = pos
        self.traversed |= 1 << pos.to_index(self.size)

    def is_visited(self, pos: Position) -> bool:
        return bool((self.traversed >> pos.to_index(self.size)) & 1)

    def advance(self, pos: Position) -> None:
        if not pos.is_valid(self.size):
            raise IllegalMoveError(f"{pos} is off the board")
        if self.is_visited(pos):
            raise IllegalMoveError(f"{pos} was already visited")
        self._mark(pos)
        self.steps += 1

    @property
    def visited_count(self) -> int:
        return bin(self.traversed).count("1")

    def is_complete(self) -> bool:
        return self.visited_count == self.size * self.size

    def adjacent_by_knight_move(self, a: Position, b: Position) -> bool:
        return is_knight_move(a, b)

    def can_close(self, target: Position) -> bool:
        """Is target one knight move away from the current cell."""
        return self.adjacent_by_knight_move(self.current, target)

    def candidate_moves(self, origin: Optional[Position] = None) -> List[Position]:
        if origin is None:
            origin = self.current
        moves = []
        for offset in KNIGHT_OFFSETS:
            after_move = origin + offset
            if after_move.is_valid(self.size) and not self.is_visited(after_move):
                moves.append(after_move)
        return moves

    def visited_positions(self) -> Iterator[Position]:
        for idx in iter_bits(self.traversed):
            yield Position.from_index(idx, self.size)

    def __repr__(self) -> str:
        return (
            f"BoardState(size={self.size}, current={self.current}, "
            f"visited={self.visited_count})"
        )
