import pytest

from tetris_board import (blocked_below, blocked_by_field, blocked_left,
                          blocked_right, clear_lines, format_field, is_blocked,
                          lock, new_field, parse_field)
from tetris_piece import (EMPTY, FIELD_HEIGHT, FIELD_WIDTH, I_TETROMINO,
                          O_TETROMINO, T_TETROMINO)


def test_new_field_is_empty_and_full_size():
    field = new_field()
    assert len(field) == FIELD_HEIGHT
    assert all(len(row) == FIELD_WIDTH for row in field)
    assert all(v == EMPTY for row in field for v in row)


def test_clear_lines_drops_full_rows_and_pads_top():
    field = parse_field("""
        --T-------
        IIIIIIIIII
        ---J------
        OOOOOOOOOO
    """)
    cleared, n = clear_lines(field)
    assert n == 2
    assert len(cleared) == FIELD_HEIGHT
    assert format_field(cleared).splitlines()[-2:] == ["--T-------", "---J------"]
    assert all(v == EMPTY for row in cleared[:-2] for v in row)


def test_clear_lines_without_full_rows_is_identity():
    field = parse_field("IIIIIIIII-")
    assert clear_lines(field) == (field, 0)


def test_walls_and_floor():
    assert blocked_left(T_TETROMINO, (0, 5))
    assert not blocked_left(T_TETROMINO, (1, 5))
    assert blocked_right(T_TETROMINO, (9, 5))
    assert not blocked_right(T_TETROMINO, (8, 5))
    assert blocked_below(O_TETROMINO, (4, 21))
    assert not blocked_below(O_TETROMINO, (4, 20))


def test_blocks_above_the_top_are_not_blocked_by_field():
    field = parse_field("\n".join(["OOOOOOOOOO"] * FIELD_HEIGHT))
    assert not blocked_by_field(field, I_TETROMINO, (4, -1))
    assert blocked_by_field(field, I_TETROMINO, (4, 0))
    assert not is_blocked(new_field(), I_TETROMINO, (4, -3))


def test_lock_writes_kind_and_skips_cells_above_the_top():
    field = new_field()
    locked = lock(field, O_TETROMINO, (0, -1))
    assert locked[0][:2] == ("O", "O")
    assert sum(v != EMPTY for row in locked for v in row) == 2
    assert field == new_field()


def test_parse_field_rejects_bad_rows():
    with pytest.raises(ValueError):
        parse_field("III")
    with pytest.raises(ValueError):
        parse_field("XXXXXXXXXX")
    with pytest.raises(ValueError):
        parse_field("\n".join(["----------"] * (FIELD_HEIGHT + 1)))
