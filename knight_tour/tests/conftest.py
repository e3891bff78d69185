import random
import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from board_state import BoardState  # noqa: E402
from position import Position  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def corner_board():
    """Fresh 8x8 board with the knight on a1 (row 0, col 0)."""
    return BoardState(Position(0, 0))


@pytest.fixture(scope="session")
def small_tour():
    """A closed 6x6 tour from b2. Corner starts on 6x6 rarely close."""
    from tour_driver import find_tour

    start = Position(1, 1)
    return start, find_tour(start, max_attempts=200, board_size=6, seed=5)
