
"""
Rendering helpers: turn an engine Snapshot into pixels.

- Pre-render one cell Surface per colour and blit it.
- Pre-render the static background (grid lines + panel + preview frame).
- Cache the score text; re-render only when the value changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims, PREVIEW_CELLS
from tetris_piece import COLS, ROWS, COLOR_NAMES, Piece

COLORS: Dict[str, Tuple[int,int,int]] = {
    "cyan": (102,224,255),
    "blue": (106,119,255),
    "orange": (255,158,94),
    "yellow": (255,224,102),
    "green": (94,224,142),
    "purple": (200,119,255),
    "red": (255,102,119),
}

BG = (17,24,39)
BOARD_BG = (31,41,55)

def color_for_value(v: int) -> Tuple[int,int,int]:
    """Cell value -> RGB through the ordered colour table (index = value-1)."""
    return COLORS[COLOR_NAMES[v-1]]

@dataclass
class HudCache:
    score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (board + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        pygame.draw.rect(self.bg, BOARD_BG, self.board_rect)
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        pygame.draw.rect(self.bg, (255,255,255), self.board_rect.inflate(4, 4), 2)
        frame = pygame.Rect(d.preview_x, d.preview_y, PREVIEW_CELLS*d.cell, PREVIEW_CELLS*d.cell)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (255,255,255), frame.inflate(4, 4), 1)

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for name, col in COLORS.items():
            s = pygame.Surface((c, c))
            s.fill(col)
            pygame.draw.rect(s, (0,0,0), (0,0,c,c), 1)
            self.cell_surf[name] = s

    def cell_rect(self, row: int, col: int) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x + col*d.cell, d.board_y + row*d.cell, d.cell, d.cell)

    # ---------- Drawing ----------
    def draw(self, screen: pygame.Surface, snap) -> None:
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(snap.grid):
            for x, v in enumerate(row):
                if v:
                    screen.blit(self.cell_surf[COLOR_NAMES[v-1]], self.cell_rect(y, x))
        self.draw_piece(screen, snap.piece, snap.position.row, snap.position.col)
        self.draw_panel_hud(screen, snap.score, snap.next_piece)

    def draw_piece(self, screen: pygame.Surface, piece: Piece, row: int, col: int):
        for y, x in piece.cells():
            if row + y >= 0:
                screen.blit(self.cell_surf[piece.color], self.cell_rect(row+y, col+x))

    def draw_panel_hud(self, screen: pygame.Surface, score: int, next_piece: Piece):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Next Piece", True, (253,224,71))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (74,222,128))
        screen.blit(self.hud.score_s, (d.panel_x + d.margin, d.panel_y + 12))
        screen.blit(self.hud.title, (d.preview_x, d.preview_y - 28))
        # preview is offset one cell into its frame
        for y, x in next_piece.cells():
            screen.blit(self.cell_surf[next_piece.color],
                        (d.preview_x + (x+1)*d.cell, d.preview_y + (y+1)*d.cell))
