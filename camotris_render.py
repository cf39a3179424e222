"""
Rendering helpers for camotris.

- Pre-render one cell Surface per color index and blit it.
- Pre-render the static background (grid, panel frame, buttons).
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all settled cells; rebuild it only when the
  session's revision changes (after a lock).
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from camotris_layout import Dims
from camotris_piece import COLS, ROWS

# Camo palette, indexed by cell value
COLORS: List[Optional[Tuple[int,int,int]]] = [
    None,
    (107,142,35),   # olive drab
    (139,69,19),    # saddle brown
    (85,107,47),    # dark olive green
    (47,79,79),     # dark slate gray
    (160,82,45),    # sienna
    (222,184,135),  # burly wood
    (128,128,0),    # olive
]

BUTTON_LABELS = {"left": "<", "right": ">", "down": "v", "rotate": "Rotate"}

@dataclass
class HudCache:
    score: int = -1
    time_left: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    time_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self.board_revision = -1

    # ---------- Static background (grid + panel + buttons) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((24,28,20))
        pygame.draw.rect(self.bg, (0,0,0), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (38,44,32)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (36,42,30), panel_rect)
        pygame.draw.rect(self.bg, (85,107,47), panel_rect, 1)
        for name, rect in d.buttons.items():
            r = pygame.Rect(rect)
            pygame.draw.rect(self.bg, (85,107,47), r)
            pygame.draw.rect(self.bg, (222,184,135), r, 1)
            label = self.font.render(BUTTON_LABELS[name], True, (240,235,220))
            self.bg.blit(label, label.get_rect(center=r.center))

    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for i, col in enumerate(COLORS):
            if col is None:
                continue
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[i] = s

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        c = self.dims.cell
        return pygame.Rect(self.dims.board_x + bx*c, self.dims.board_y + by*c, c, c)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: List[List[int]]):
        """Rebuilds the settled-cells surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, v in enumerate(row):
                if v:
                    self.board_surface.blit(self.cell_surf[v], (x*c + 1, y*c + 1))

    def draw_piece(self, screen: pygame.Surface, piece):
        for r, row in enumerate(piece.matrix):
            for c, v in enumerate(row):
                if v and piece.y + r >= 0:
                    rect = self.cell_rect(piece.x + c, piece.y + r)
                    screen.blit(self.cell_surf[v], (rect.x + 1, rect.y + 1))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, time_left: int, lines: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Time Attack", True, (222,184,135))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (220,220,200))
        if time_left != self.hud.time_left:
            self.hud.time_left = time_left
            self.hud.time_s = f.render(f"Time: {max(time_left, 0)}", True, (220,220,200))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, (220,220,200))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.time_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (220,220,200)),
                f.render("←/→ Move", True, (180,180,160)),
                f.render("↓ Drop", True, (180,180,160)),
                f.render("Q Rot CCW", True, (180,180,160)),
                f.render("W/↑ Rot CW", True, (180,180,160)),
                f.render("R Restart", True, (180,180,160)),
            ]
        y = d.panel_y + 140
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_game_over(self, screen: pygame.Surface):
        d = self.dims
        shade = pygame.Surface((d.total_w, d.total_h), pygame.SRCALPHA)
        shade.fill((0,0,0,191))
        screen.blit(shade, (0,0))
        cx, cy = d.board_x + d.board_w // 2, d.board_y + d.board_h // 2
        msg = self.big_font.render("GAME OVER", True, (255,255,255))
        screen.blit(msg, msg.get_rect(center=(cx, cy)))
        hint = self.font.render("R to Restart", True, (222,184,135))
        screen.blit(hint, hint.get_rect(center=(cx, cy + 40)))

    def draw(self, screen: pygame.Surface, session):
        """Full redraw of a read-only session."""
        if session.revision != self.board_revision:
            self.rebuild_board_surface(session.board)
            self.board_revision = session.revision
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if session.piece is not None:
            self.draw_piece(screen, session.piece)
        self.draw_panel_hud(screen, session.score, session.time_left, session.lines)
        if session.over:
            self.draw_game_over(screen)
