import pytest

from treblecross.game_basics import (
    EMPTY,
    Board,
    deserialize_board,
    other_symbol,
    parse_index,
    render_board,
    serialize_board,
)


def _board_with(size, symbol, positions):
    b = Board(size)
    for p in positions:
        b.place_move(p, symbol)
    return b


def test_new_board_is_empty():
    b = Board(5)
    assert len(b) == 5
    assert b.cells == [EMPTY] * 5
    assert b.empty_cells() == [0, 1, 2, 3, 4]
    assert not b.is_full()


@pytest.mark.parametrize("size", [0, -1, 2.5, True, "5"])
def test_board_rejects_bad_size(size):
    with pytest.raises(ValueError):
        Board(size)


def test_is_valid_move_bounds_and_occupancy():
    b = Board(4)
    assert b.is_valid_move(0)
    assert b.is_valid_move(3)
    assert not b.is_valid_move(-1)
    assert not b.is_valid_move(4)
    assert not b.is_valid_move("1")
    assert not b.is_valid_move(None)
    b.place_move(2, 'X')
    assert not b.is_valid_move(2)


def test_consecutive_line_wins():
    # N=5, X at 0,1,2
    b = _board_with(5, 'X', [0, 1, 2])
    assert b.has_winning_line('X')
    assert not b.has_winning_line('O')
    assert b.winner() == 'X'


def test_line_wraps_around_edge():
    # N=5, X at 4,0,1
    b = _board_with(5, 'X', [4, 0, 1])
    assert b.has_winning_line('X')


def test_gap_is_not_a_line():
    b = _board_with(6, 'X', [0, 1, 3])
    assert not b.has_winning_line('X')
    assert b.winner() is None


def test_mixed_symbols_do_not_win():
    b = Board(5)
    b.place_move(0, 'X')
    b.place_move(1, 'O')
    b.place_move(2, 'X')
    assert not b.has_winning_line('X')
    assert not b.has_winning_line('O')


def test_empty_is_never_a_winning_symbol():
    assert not Board(5).has_winning_line(EMPTY)


def test_tiny_boards_wrap_onto_themselves():
    assert _board_with(1, 'X', [0]).has_winning_line('X')
    assert not _board_with(2, 'X', [0]).has_winning_line('X')
    assert _board_with(2, 'X', [0, 1]).has_winning_line('X')


def test_is_full_with_one_empty_cell_then_filled():
    b = Board.from_string("XOXO ")
    assert not b.is_full()
    b.place_move(4, 'X')
    assert b.is_full()


def test_reset_clears_every_cell():
    b = Board.from_string("XO XO")
    b.reset()
    assert b.cells == [EMPTY] * 5


def test_place_move_overwrites_without_checks():
    b = Board(3)
    b.place_move(1, 'X')
    b.place_move(1, 'O')
    assert b[1] == 'O'


def test_serialize_roundtrip_and_bad_chars():
    assert serialize_board(['X', ' ', 'O']) == "X O"
    assert deserialize_board("X O") == ['X', ' ', 'O']
    with pytest.raises(ValueError):
        deserialize_board("X-O")


def test_board_equality_and_copy_independence():
    b = Board.from_string("X  O ")
    c = b.copy()
    assert c == b
    assert b == ['X', ' ', ' ', 'O', ' ']
    c.place_move(1, 'O')
    assert c != b


def test_load_cells_requires_matching_length():
    b = Board(3)
    with pytest.raises(ValueError):
        b.load_cells(['X', 'O'])


def test_other_symbol():
    assert other_symbol('X') == 'O'
    assert other_symbol('O') == 'X'
    with pytest.raises(ValueError):
        other_symbol(EMPTY)


def test_render_board_layout():
    b = Board.from_string("X O")
    assert render_board(b) == "Board:\nX   O "
    assert render_board(b, ruler=True).splitlines()[-1] == "0 1 2"


@pytest.mark.parametrize("text,expected", [("7", 7), (" 12 ", 12), ("+3", 3), ("-1", -1), ("007", 7)])
def test_parse_index_accepts_plain_integers(text, expected):
    assert parse_index(text) == expected


@pytest.mark.parametrize("text", ["", " ", "1_0", "1.0", "x", "+", "--1", "1 2"])
def test_parse_index_rejects_everything_else(text):
    assert parse_index(text) is None
