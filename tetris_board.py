"""Field helpers: collision queries, lock, line clear, text form"""
from typing import Tuple

from tetris_piece import (EMPTY, BLOCK_KINDS, FIELD_WIDTH, FIELD_HEIGHT,
                          Tetromino, Coord, block_coordinates)

Line = Tuple[str, ...]
Field = Tuple[Line, ...]

EMPTY_LINE: Line = (EMPTY,) * FIELD_WIDTH


def new_field() -> Field:
    return (EMPTY_LINE,) * FIELD_HEIGHT


def in_field(x: int, y: int) -> bool:
    return 0 <= x < FIELD_WIDTH and 0 <= y < FIELD_HEIGHT


def blocked_below(piece: Tetromino, pos: Coord) -> bool:
    return any(y >= FIELD_HEIGHT for _, y in block_coordinates(piece, pos))


def blocked_left(piece: Tetromino, pos: Coord) -> bool:
    return any(x < 0 for x, _ in block_coordinates(piece, pos))


def blocked_right(piece: Tetromino, pos: Coord) -> bool:
    return any(x >= FIELD_WIDTH for x, _ in block_coordinates(piece, pos))


def blocked_by_field(field: Field, piece: Tetromino, pos: Coord) -> bool:
    # cells above the top (y < 0) can never meet a locked block
    return any(
        in_field(x, y) and field[y][x] != EMPTY
        for x, y in block_coordinates(piece, pos)
    )


def is_blocked(field: Field, piece: Tetromino, pos: Coord) -> bool:
    """Return True if piece collides with walls/floor or existing blocks."""
    return (blocked_below(piece, pos) or blocked_left(piece, pos)
            or blocked_right(piece, pos) or blocked_by_field(field, piece, pos))


def lock(field: Field, piece: Tetromino, pos: Coord) -> Field:
    """Return a new field with the piece written in; off-field blocks are dropped."""
    rows = [list(r) for r in field]
    for x, y in block_coordinates(piece, pos):
        if in_field(x, y):
            rows[y][x] = piece.block_kind
    return tuple(tuple(r) for r in rows)


def clear_lines(field: Field) -> Tuple[Field, int]:
    """Remove full lines and return (new field, number of cleared rows)."""
    kept = tuple(r for r in field if any(v == EMPTY for v in r))
    cleared = len(field) - len(kept)
    return (EMPTY_LINE,) * cleared + kept, cleared


def parse_field(text: str) -> Field:
    """Build a field from one line of text per row, "-" marking empty cells.

    Fewer than FIELD_HEIGHT lines are padded with empty rows at the top, so
    tests only need to spell out the bottom of the stack.
    """
    lines = [l.strip() for l in text.strip("\n").splitlines() if l.strip()]
    if len(lines) > FIELD_HEIGHT:
        raise ValueError(f"field has {len(lines)} rows, at most {FIELD_HEIGHT} allowed")
    rows = []
    for l in lines:
        if len(l) != FIELD_WIDTH:
            raise ValueError(f"row {l!r} is not {FIELD_WIDTH} cells wide")
        row = tuple(EMPTY if c == "-" else c for c in l)
        bad = set(row) - set(BLOCK_KINDS) - {EMPTY}
        if bad:
            raise ValueError(f"unknown cells {sorted(bad)} in row {l!r}")
        rows.append(row)
    return (EMPTY_LINE,) * (FIELD_HEIGHT - len(rows)) + tuple(rows)


def format_field(field: Field) -> str:
    return "\n".join("".join("-" if v == EMPTY else v for v in r) for r in field)
