"""Piece model, canonical shapes, rotation about a centre"""
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

FIELD_WIDTH, FIELD_HEIGHT = 10, 22
FIELD_VISIBLE_HEIGHT = 20
BUFFER_ROWS = FIELD_HEIGHT - FIELD_VISIBLE_HEIGHT
STARTING_POSITION = (FIELD_WIDTH // 2 - 1, 0)

EMPTY = " "
BLOCK_KINDS = ("I", "J", "L", "O", "S", "T", "Z")

Grid = Tuple[Tuple[str, ...], ...]
Coord = Tuple[int, int]


@dataclass(frozen=True)
class Tetromino:
    block_kind: str
    center: Tuple[float, float]
    grid: Grid


def _grid(*rows: str) -> Grid:
    return tuple(tuple(EMPTY if c == "." else c for c in row) for row in rows)


# Canonical orientation; rows top->bottom, "." is empty
SHAPES: Dict[str, Tuple[Tuple[float, float], Grid]] = {
    "I": ((1, 0), _grid("IIII")),
    "J": ((1, 0), _grid("JJJ", "..J")),
    "L": ((1, 0), _grid("LLL", "L..")),
    "O": ((0.5, 0.5), _grid("OO", "OO")),
    "S": ((1, 0), _grid(".SS", "SS.")),
    "T": ((1, 0), _grid("TTT", ".T.")),
    "Z": ((1, 0), _grid("ZZ.", ".ZZ")),
}

TETROMINOES: Dict[str, Tetromino] = {
    t: Tetromino(t, centre, grid) for t, (centre, grid) in SHAPES.items()
}
ALL_TETROMINOES: List[Tetromino] = [TETROMINOES[t] for t in BLOCK_KINDS]

I_TETROMINO, J_TETROMINO, L_TETROMINO, O_TETROMINO, S_TETROMINO, T_TETROMINO, Z_TETROMINO = ALL_TETROMINOES


def rotate_cw(m: Grid) -> Grid: return tuple(tuple(r) for r in zip(*m[::-1]))
def rotate_ccw(m: Grid) -> Grid: return tuple(tuple(c) for c in zip(*m))[::-1]


def rotated_cw(t: Tetromino) -> Tetromino:
    cx, cy = t.center
    rows = len(t.grid)
    return Tetromino(t.block_kind, (rows - 1 - cy, cx), rotate_cw(t.grid))


def rotated_ccw(t: Tetromino) -> Tetromino:
    cx, cy = t.center
    cols = len(t.grid[0])
    return Tetromino(t.block_kind, (cy, cols - 1 - cx), rotate_ccw(t.grid))


def block_coordinates(t: Tetromino, position: Coord) -> List[Coord]:
    """Field coordinates of each block of `t` with its centre at `position`.

    The centre is floored, so O (centre 0.5, 0.5) never appears to move when
    rotated and I turns about its second cell.
    """
    px, py = position
    ox, oy = math.floor(t.center[0]), math.floor(t.center[1])
    return [
        (px + col - ox, py + row - oy)
        for row, cells in enumerate(t.grid)
        for col, v in enumerate(cells)
        if v != EMPTY
    ]
