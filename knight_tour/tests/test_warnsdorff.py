import random
from collections import Counter

from board_state import BoardState
from move_generator import MoveGenerator
from position import Position
from warnsdorff import WarnsdorffSelector


def test_degree_uses_the_current_visited_set(corner_board):
    gen = MoveGenerator()
    # (0, 0) is visited so neither neighbour counts it
    assert gen.degree(corner_board, Position(1, 2)) == 5
    assert gen.degree(corner_board, Position(2, 1)) == 5
    corner_board.advance(Position(1, 2))
    assert gen.degree(corner_board, Position(2, 1)) == 5
    assert gen.degree(corner_board, Position(3, 3)) == 7


def test_lookahead_does_not_touch_the_board(corner_board):
    MoveGenerator().candidate_moves(corner_board, Position(4, 4))
    assert corner_board.visited_count == 1
    assert corner_board.current == Position(0, 0)


def test_prefers_fewest_onward_moves(rng):
    board = BoardState(Position(0, 1))
    selector = WarnsdorffSelector(rng)
    ranked = selector.ranked_candidates(board)
    assert ranked == [(Position(2, 0), 3), (Position(1, 3), 5), (Position(2, 2), 7)]
    for _ in range(20):
        assert selector.select(board) == Position(2, 0)


def test_stuck_knight_gets_none(rng):
    # the centre of a 3x3 board has no knight moves
    board = BoardState(Position(1, 1), board_size=3)
    assert WarnsdorffSelector(rng).select(board) is None


def test_select_does_not_mutate(corner_board, rng):
    WarnsdorffSelector(rng).select(corner_board)
    assert corner_board.current == Position(0, 0)
    assert corner_board.visited_count == 1


def test_ties_are_split_roughly_evenly(corner_board):
    selector = WarnsdorffSelector(random.Random(99))
    assert selector.best_moves(corner_board) == [Position(1, 2), Position(2, 1)]
    picks = Counter(selector.select(corner_board) for _ in range(2000))
    assert set(picks) == {Position(1, 2), Position(2, 1)}
    for count in picks.values():
        assert 850 < count < 1150


def test_same_seed_same_choices(corner_board):
    a = WarnsdorffSelector(random.Random(5))
    b = WarnsdorffSelector(random.Random(5))
    assert [a.select(corner_board) for _ in range(50)] == [
        b.select(corner_board) for _ in range(50)
    ]
