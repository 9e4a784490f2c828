# tetris_layout.py
from dataclasses import dataclass
from typing import Optional, Tuple
from tetris_config import CONFIG
from tetris_piece import FIELD_WIDTH, FIELD_VISIBLE_HEIGHT, BUFFER_ROWS

Rect = Tuple[int, int, int, int]

@dataclass(frozen=True)
class Dims:
    cell: int
    margin: int
    board_x: int
    board_y: int
    board_w: int
    board_h: int
    panel_x: int
    panel_w: int
    preview_cell: int
    preview_x: int
    preview_y: int
    total_w: int
    total_h: int

def compute_dims(cell: Optional[int] = None) -> Dims:
    cell = int(cell if cell is not None else CONFIG["CELL_SIZE"])
    margin, panel_w = 16, 220
    board_w = FIELD_WIDTH * cell
    board_h = FIELD_VISIBLE_HEIGHT * cell
    panel_x = margin + board_w + margin
    return Dims(
        cell=cell, margin=margin,
        board_x=margin, board_y=margin, board_w=board_w, board_h=board_h,
        panel_x=panel_x, panel_w=panel_w,
        preview_cell=max(14, int(cell * 0.75)),
        preview_x=panel_x + 12, preview_y=margin + 150,
        total_w=panel_x + panel_w + margin,
        total_h=margin + board_h + margin,
    )

def cell_rect(d: Dims, x: int, y: int) -> Optional[Rect]:
    """Screen rect of field cell (x, y); None for buffer rows and off-field cells."""
    row = y - BUFFER_ROWS
    if not (0 <= x < FIELD_WIDTH and 0 <= row < FIELD_VISIBLE_HEIGHT):
        return None
    return (d.board_x + x * d.cell, d.board_y + row * d.cell, d.cell, d.cell)
