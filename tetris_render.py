"""
Rendering helpers for the Tetris project.

- Pre-render one cell Surface per color and blit it.
- Pre-render the static background (grid lines) once per Dims.
- The engine hands over a composite view (settled cells + active piece);
  this module only maps color tags to pixels.
"""
from __future__ import annotations
import pygame
from typing import Dict, Optional, Sequence, Tuple
from tetris_grid import Cell
from tetris_layout import Dims

RGB = Tuple[int, int, int]

COLOR_NAMES: Dict[Cell, str] = {
    Cell.EMPTY: "transparent",
    Cell.I: "cyan",
    Cell.J: "blue",
    Cell.L: "orange",
    Cell.O: "yellow",
    Cell.S: "lime",
    Cell.T: "purple",
    Cell.Z: "red",
}

# CSS values; "transparent" has no fill
PALETTE: Dict[str, RGB] = {
    "cyan": (0, 255, 255),
    "blue": (0, 0, 255),
    "orange": (255, 165, 0),
    "yellow": (255, 255, 0),
    "lime": (0, 255, 0),
    "purple": (128, 0, 128),
    "red": (255, 0, 0),
}


def color_for(cell: int) -> Optional[RGB]:
    return PALETTE.get(COLOR_NAMES[Cell(cell)])


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, cols: int, rows: int, font: pygame.font.Font):
        self.dims = dims
        self.cols, self.rows = cols, rows
        self.font = font
        self._make_static()
        self._make_cells()

    # ---------- Static background (grid lines) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[Cell, pygame.Surface] = {}
        c = self.dims.cell
        for t in Cell:
            col = color_for(t)
            if col is None:
                continue
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s

    def draw_view(self, screen: pygame.Surface, view: Sequence[Sequence[int]]):
        """Blit background, then every non-transparent cell of the view."""
        screen.blit(self.bg, (0,0))
        d = self.dims
        for y, row in enumerate(view):
            for x, t in enumerate(row):
                surf = self.cell_surf.get(Cell(t))
                if surf is not None:
                    screen.blit(surf, (d.board_x + x*d.cell + 1, d.board_y + y*d.cell + 1))

    def draw_message(self, screen: pygame.Surface, text: str, font: Optional[pygame.font.Font] = None):
        d = self.dims
        msg = (font or self.font).render(text, True, (255, 220, 220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)
