"""Board coordinates and the knight's move offsets."""

from dataclasses import dataclass
from typing import Tuple

FILES = "abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class Offset:
    d_row: int
    d_col: int


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def __add__(self, other: Offset) -> "Position":
        # no bounds check here, callers use is_valid
        return Position(self.row + other.d_row, self.col + other.d_col)

    def __sub__(self, other: "Position") -> Offset:
        return Offset(self.row - other.row, self.col - other.col)

    def __str__(self):
        return f"({self.row}, {self.col})"

    def translate(self, offset: Offset) -> "Position":
        return self + offset

    def is_valid(self, board_size: int) -> bool:
        return 0 <= self.row < board_size and 0 <= self.col < board_size

    def to_index(self, board_size: int) -> int:
        return self.row * board_size + self.col

    @classmethod
    def from_index(cls, index: int, board_size: int) -> "Position":
        return cls(index // board_size, index % board_size)

    def to_algebraic(self) -> str:
        return f"{FILES[self.col]}{self.row + 1}"

    @classmethod
    def from_algebraic(cls, text: str) -> "Position":
        """very minimal validation, 'b2' -> Position(1, 1)"""
        text = text.strip().lower()
        if len(text) < 2 or text[0] not in FILES or not text[1:].isdigit():
            raise ValueError(f"Input {text} incorrect format")
        return cls(int(text[1:]) - 1, FILES.index(text[0]))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


KNIGHT_OFFSETS: Tuple[Offset, ...] = (
    Offset(-2, -1),
    Offset(-2, 1),
    Offset(-1, -2),
    Offset(-1, 2),
    Offset(1, -2),
    Offset(1, 2),
    Offset(2, -1),
    Offset(2, 1),
)


def is_knight_move(a: Position, b: Position) -> bool:
    return (b - a) in KNIGHT_OFFSETS


def parse_position(text: str) -> Position:
    """Accept either algebraic ('b2') or 'row,col' ('1,1')."""
    if "," in text:
        row, _, col = text.partition(",")
        try:
            return Position(int(row), int(col))
        except ValueError:
            raise ValueError(f"Input {text} incorrect format") from None
    return Position.from_algebraic(text)
