#! /usr/bin/env python
"""
Show a tour one jump at a time, either as plain text in the terminal or as
a textual grid. Both walk the same frames: start, every move, and the jump
back to start.
"""

import sys
import time
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterator, List, Sequence, TextIO

from textual.app import App, ComposeResult
from textual.containers import Grid
from textual.widgets import Static

from board_state import BOARD_SIZE, BoardState
from position import Position

FRAME_DELAY = 0.25
CURRENT = "X"
VISITED = "■"
UNVISITED = "□"


@dataclass(frozen=True)
class Frame:
    current: Position
    visited: FrozenSet[Position]


def board_frames(
    start: Position, path: Sequence[Position], board_size: int = BOARD_SIZE
) -> Iterator[Frame]:
    """Replay the path on a fresh board, then the jump back to start."""
    if not path:
        return
    board = BoardState(start, board_size)
    yield Frame(start, frozenset(board.visited_positions()))
    for cell in path:
        board.advance(cell)
        yield Frame(cell, frozenset(board.visited_positions()))
    yield Frame(start, frozenset(board.visited_positions()))


def cell_marker(frame: Frame, cell: Position) -> str:
    if cell == frame.current:
        return CURRENT
    if cell in frame.visited:
        return VISITED
    return UNVISITED


def format_frame(frame: Frame, board_size: int = BOARD_SIZE) -> str:
    lines = []
    for row in range(board_size):
        lines.append(
            " ".join(cell_marker(frame, Position(row, col)) for col in range(board_size))
        )
    return "\n".join(lines)


class ConsoleRenderer:
    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        delay: float = FRAME_DELAY,
        out: TextIO = sys.stdout,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.board_size = board_size
        self.delay = delay
        self.out = out
        self.sleep = sleep

    def render(self, start: Position, path: Sequence[Position]) -> int:
        """Print every frame, returns how many were printed."""
        if not path:
            print(f"No closed tour to show from {start}", file=self.out)
            return 0
        shown = 0
        for frame in board_frames(start, path, self.board_size):
            if shown:
                self.sleep(self.delay)
            print(format_frame(frame, self.board_size), file=self.out)
            print(file=self.out, flush=True)
            shown += 1
        return shown


class TourBoardApp(App[None]):
    CSS = """
    Grid {
        & .cell {
            width: 1fr;
            height: 1fr;
            content-align: center middle;
        }
        & .light { background: #f0d9b5; color: black; }
        & .dark { background: #b58863; color: white; }
        & .visited { background: #6b8e5a; color: white; }
        & .current { background: #da1313; color: white; text-style: bold; }
    }
    """

    BINDINGS = [("q", "quit", "Quit")]

    def __init__(
        self,
        start: Position,
        path: Sequence[Position],
        board_size: int = BOARD_SIZE,
        delay: float = FRAME_DELAY,
    ):
        super().__init__()
        self.board_size = board_size
        self.delay = delay
        self.frames: List[Frame] = list(board_frames(start, path, board_size))
        self.frame_idx = 0
        # every cell widget by (row, col)
        self.grid_widgets = {}

    def compose(self) -> ComposeResult:
        with Grid():
            for i in range(self.board_size):
                for j in range(self.board_size):
                    color_class = "light" if (i + j) % 2 == 0 else "dark"
                    widget = Static(UNVISITED, classes=f"cell {color_class}")
                    self.grid_widgets[(i, j)] = widget
                    yield widget

    def on_mount(self) -> None:
        grid = self.query_one(Grid)
        grid.styles.grid_size_columns = self.board_size
        grid.styles.grid_size_rows = self.board_size
        if not self.frames:
            self.title = "No closed tour found"
            return
        self.show_frame(self.frames[0])
        self.timer = self.set_interval(self.delay, self.next_frame)

    def next_frame(self) -> None:
        if self.frame_idx + 1 >= len(self.frames):
            self.timer.stop()
            self.title = "Tour closed"
            return
        self.frame_idx += 1
        self.show_frame(self.frames[self.frame_idx])

    def show_frame(self, frame: Frame) -> None:
        self.sub_title = f"move {self.frame_idx} of {len(self.frames) - 1}"
        for (i, j), widget in self.grid_widgets.items():
            marker = cell_marker(frame, Position(i, j))
            widget.update(marker)
            widget.set_class(marker == CURRENT, "current")
            widget.set_class(marker == VISITED, "visited")
