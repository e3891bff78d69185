import pytest

from position import KNIGHT_OFFSETS, Offset, Position, is_knight_move, parse_position


def test_translate_does_not_check_bounds():
    moved = Position(0, 0) + Offset(-2, -1)
    assert moved == Position(-2, -1)
    assert not moved.is_valid(8)
    assert Position(3, 3).translate(Offset(1, 2)) == Position(4, 5)


def test_positions_compare_by_value():
    assert Position(2, 5) == Position(2, 5)
    assert Position(2, 5) != Position(5, 2)
    assert len({Position(1, 1), Position(1, 1)}) == 1


@pytest.mark.parametrize(
    "pos,size,expected",
    [
        (Position(0, 0), 8, True),
        (Position(7, 7), 8, True),
        (Position(8, 0), 8, False),
        (Position(0, -1), 8, False),
        (Position(2, 2), 3, True),
        (Position(3, 2), 3, False),
    ],
)
def test_is_valid(pos, size, expected):
    assert pos.is_valid(size) is expected


def test_knight_offsets_are_the_eight_l_shapes():
    assert len(set(KNIGHT_OFFSETS)) == 8
    for offset in KNIGHT_OFFSETS:
        assert {abs(offset.d_row), abs(offset.d_col)} == {1, 2}


def test_index_round_trip_for_corner_cells():
    assert Position(0, 0).to_index(8) == 0
    assert Position(7, 7).to_index(8) == 63
    assert Position.from_index(9, 8) == Position(1, 1)


def test_knight_move_is_symmetric():
    cells = [Position(r, c) for r in range(5) for c in range(5)]
    for a in cells:
        for b in cells:
            assert is_knight_move(a, b) == is_knight_move(b, a)


def test_knight_move_needs_an_l_shape():
    assert is_knight_move(Position(1, 1), Position(3, 2))
    assert not is_knight_move(Position(1, 1), Position(2, 2))
    assert not is_knight_move(Position(1, 1), Position(1, 1))


class TestParsing:
    def test_algebraic(self):
        assert Position.from_algebraic("a1") == Position(0, 0)
        assert Position.from_algebraic("B2") == Position(1, 1)
        assert Position(1, 1).to_algebraic() == "b2"

    def test_row_col_pair(self):
        assert parse_position("1,1") == Position(1, 1)
        assert parse_position(" 3, 4") == Position(3, 4)

    @pytest.mark.parametrize("text", ["", "a", "1a", "x,y", "b2x"])
    def test_malformed_input_raises(self, text):
        with pytest.raises(ValueError):
            parse_position(text)
