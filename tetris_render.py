"""
Rendering helpers for the pygame host. They only read Game values.

- Pre-render one cell Surface per block kind and blit it.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris import Game, level, visible_field, piece_cells
from tetris_layout import Dims, cell_rect
from tetris_piece import EMPTY, FIELD_WIDTH, FIELD_VISIBLE_HEIGHT, BUFFER_ROWS, Tetromino

# Colors per block kind
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}

@dataclass
class HudCache:
    points: int = -1
    level: int = -1
    lines: int = -1
    next_kind: str = ""
    title: Optional[pygame.Surface] = None
    points_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(FIELD_WIDTH+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(FIELD_VISIBLE_HEIGHT+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.board_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        pc = d.preview_cell
        frame = pygame.Rect(d.preview_x-6, d.preview_y-6, pc*4+12, pc*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s

    def draw_cell(self, screen: pygame.Surface, t: str, x: int, y: int):
        r = cell_rect(self.dims, x, y)
        if r is not None:
            screen.blit(self.cell_surf[t], (r[0]+1, r[1]+1))

    # ---------- Field + active piece ----------
    def draw_game(self, screen: pygame.Surface, game: Game):
        screen.blit(self.bg, (0,0))
        for row, line in enumerate(visible_field(game.field)):
            for x, t in enumerate(line):
                if t != EMPTY:
                    self.draw_cell(screen, t, x, row + BUFFER_ROWS)
        if not game.game_over:
            t = game.current_tetromino.block_kind
            for x, y in piece_cells(game):
                self.draw_cell(screen, t, x, y)
        self.draw_panel_hud(screen, game)

    def _preview(self, piece: Tetromino) -> pygame.Surface:
        pc = self.dims.preview_cell
        s = pygame.Surface((pc*4, pc*4), pygame.SRCALPHA)
        grid = piece.grid
        offx = (4 - len(grid[0])) // 2
        offy = max(0, (4 - len(grid)) // 2)
        for y, row in enumerate(grid):
            for x, v in enumerate(row):
                if v != EMPTY:
                    block = pygame.Surface((pc-2, pc-2))
                    block.fill(COLORS[v])
                    s.blit(block, ((x+offx)*pc + 1, (y+offy)*pc + 1))
        return s

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, game: Game):
        d = self.dims
        f = self.font
        points, lines, lvl = game.score.points, game.score.lines_cleared, level(game)
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if points != self.hud.points:
            self.hud.points = points
            self.hud.points_s = f.render(f"Score: {points}", True, (200,210,240))
        if lvl != self.hud.level:
            self.hud.level = lvl
            self.hud.level_s = f.render(f"Level: {lvl}", True, (200,210,240))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, (200,210,240))
        if game.next_tetromino.block_kind != self.hud.next_kind:
            self.hud.next_kind = game.next_tetromino.block_kind
            self.hud.next_s = self._preview(game.next_tetromino)
        x = d.panel_x + 12
        screen.blit(self.hud.title, (x, d.board_y + 12))
        screen.blit(self.hud.points_s, (x, d.board_y + 44))
        screen.blit(self.hud.level_s, (x, d.board_y + 68))
        screen.blit(self.hud.lines_s, (x, d.board_y + 92))
        screen.blit(f.render("Next:", True, (200,210,240)), (x, d.board_y + 126))
        screen.blit(self.hud.next_s, (d.preview_x, d.preview_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rot CW", True, (165,175,215)),
                f.render("Z Rot CCW", True, (165,175,215)),
                f.render("Space Hard", True, (165,175,215)),
                f.render("P Pause • R Restart", True, (165,175,215)),
            ]
        y = d.board_y + 260
        for surf in self.hud.controls:
            screen.blit(surf, (x, y)); y += 20
