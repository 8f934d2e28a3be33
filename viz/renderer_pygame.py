# viz/renderer_pygame.py
from __future__ import annotations
import os
import pygame as pg
from typing import Optional, Union
from config import AppConfig
from core.interfaces import Occupant, Snapshot
import viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

HUD_PX = 28

class PygameRenderer:
    """
    Draws a snapshot as a table: a header row of column numbers, a header
    column of row numbers, one square per cell, and the status above it.
    """
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._grid_w = 0
        self._grid_h = 0
        self._frame_idx = 0
        self._font: Optional[pg.font.Font] = None

    def _configure(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self._grid_w, self._grid_h = cfg.cols, cfg.rows
        self.cell = cfg.render_cell
        self._frame_idx = 0
        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    @property
    def hud_px(self) -> int:
        return HUD_PX if self.cfg is not None and self.cfg.render_show_hud else 0

    def window_size(self) -> tuple[int, int]:
        c = self.cell
        return ((self._grid_w + 1) * c, (self._grid_h + 1) * c + self.hud_px)

    def open(self, cfg: AppConfig) -> None:
        self._configure(cfg)
        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(self.window_size())
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface (no window, no clock)."""
        if not pg.get_init():
            pg.init()
        self._configure(cfg)
        self.surf = surface
        self.clock = None  # embedding surface typically controls timing
        self._auto_flip = False

    def cell_rect(self, x: int, y: int) -> pg.Rect:
        c = self.cell
        return pg.Rect((x + 1) * c, self.hud_px + (y + 1) * c, c, c)

    def _text(self, text: str, color, center=None, topleft=None) -> None:
        if self._font is None:
            self._font = pg.font.SysFont(None, max(12, int(self.cell * 0.7)))
        img = self._font.render(text, True, color)
        rect = img.get_rect(center=center) if center else img.get_rect(topleft=topleft)
        self.surf.blit(img, rect)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell
        g = s.grid

        surf.fill(theme.BG)

        # header row / column
        for col in range(g.cols):
            hdr = pg.Rect((col + 1) * c, self.hud_px, c, c)
            pg.draw.rect(surf, theme.HEADER, hdr)
            self._text(str(col), theme.TEXT_MUTED, center=hdr.center)
        for row in range(g.rows):
            hdr = pg.Rect(0, self.hud_px + (row + 1) * c, c, c)
            pg.draw.rect(surf, theme.HEADER, hdr)
            self._text(str(row), theme.TEXT_MUTED, center=hdr.center)

        head = s.snake[0] if s.snake else None
        for idx, code in enumerate(g.occupancy):
            x, y = idx % g.cols, idx // g.cols
            occ = Occupant(int(code))
            if occ is Occupant.SNAKE:
                col = theme.HEAD if (x, y) == head else theme.BODY
            elif occ is Occupant.FOOD:
                col = theme.FOOD
            else:
                col = theme.EMPTY
            rect = self.cell_rect(x, y)
            if self.cfg.render_grid_lines:
                pg.draw.rect(surf, theme.GRID, rect)
                rect = rect.inflate(-2, -2)
            pg.draw.rect(surf, col, rect)

        if self.cfg.render_show_hud:
            status = s.status.value
            label = status if not s.reason else f"{status} ({s.reason})"
            self._text(f"{label}   length: {s.length}   eaten: {s.eaten}",
                       theme.STATUS.get(status, theme.TEXT), topleft=(6, 6))

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    # frame sink
    def push(self, snap: Snapshot) -> None:
        self.draw(snap)

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None

    def save_frame(self, s: Snapshot) -> None:
        assert self.cfg is not None, "Renderer config not set (call open first)"
        if not self.cfg.render_record_dir or self.surf is None:
            return
        self._save_surface_frame()

    # internals
    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
