
"""
Rendering helpers for the Tetris project.

- Pre-render one cell Surface per piece type and blit it.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the
  snapshot's board differs from the one last drawn.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import COLORS, COLS, ROWS
from tetris_game import GameSnapshot

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_shape: Optional[Tuple] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
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
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_drawn = None

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (7,19,33), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (30,40,70)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame
        self.pv_cell = d.pv_cell
        self.pv_box = pygame.Rect(d.pv_x, d.pv_y, d.pv_w, d.pv_h)
        pygame.draw.rect(self.bg, (7,19,33), self.pv_box)
        pygame.draw.rect(self.bg, (55,65,110), self.pv_box, 1)

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c, c))
            s.fill(col)
            pygame.draw.rect(s, (15,23,42), (0,0,c,c), 1)
            self.cell_surf[t] = s

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board):
        """Rebuilds the "locked blocks" surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, t in enumerate(row):
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x*c, y*c))
        self._board_drawn = board

    def draw_cell(self, screen: pygame.Surface, t: str, bx: int, by: int):
        screen.blit(self.cell_surf[t], (self.dims.board_x + bx*self.dims.cell,
                                        self.dims.board_y + by*self.dims.cell))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: GameSnapshot):
        screen.blit(self.bg, (0,0))
        if snap.board != self._board_drawn:
            self.rebuild_board_surface(snap.board)
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if snap.current is not None:
            t, shape, px, py = snap.current
            for r, row in enumerate(shape):
                for c, v in enumerate(row):
                    if v and py + r >= 0:
                        self.draw_cell(screen, t, px + c, py + r)
        self.draw_panel_hud(screen, snap)

    # ---------- HUD / Panel ----------
    def _render_next(self, t: str, shape) -> pygame.Surface:
        box = self.pv_box
        s = pygame.Surface(box.size, pygame.SRCALPHA)
        size = self.pv_cell
        offx = (box.w - len(shape[0]) * size) // 2
        offy = (box.h - len(shape) * size) // 2
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    block = pygame.Surface((size, size))
                    block.fill(COLORS[t])
                    pygame.draw.rect(block, (15,23,42), (0,0,size,size), 1)
                    s.blit(block, (offx + x*size, offy + y*size))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, snap: GameSnapshot):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, (200,210,240))
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, (200,210,240))
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, (200,210,240))
        if snap.next_shape != self.hud.next_shape:
            self.hud.next_shape = snap.next_shape
            self.hud.next_s = self._render_next(snap.next_type, snap.next_shape) if snap.next_shape else None
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, (200,210,240)), (d.panel_x + 12, d.panel_y + 126))
        if self.hud.next_s:
            screen.blit(self.hud.next_s, self.pv_box.topleft)
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("Space Hard drop", True, (165,175,215)),
                f.render("Enter Start", True, (165,175,215)),
                f.render("P Pause • R Restart", True, (165,175,215)),
            ]
        y = d.panel_y + 260
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
