# gridsnake/viz/renderer_pygame.py
from __future__ import annotations
import os
from typing import Optional
import pygame as pg
from gridsnake.config import AppConfig
from gridsnake.core.interfaces import Snapshot
import gridsnake.viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cell = 20
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self._auto_flip = True
        self._grid = 0
        self._frame_idx = 0
        self._overlay_text: Optional[str] = None
        self._font: Optional[pg.font.Font] = None

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self._grid = cfg.grid_size
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        side = self._grid * self.cell
        self.surf = pg.display.set_mode((side, side))
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto an existing surface (embedding, tests). Never flips the display."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self._grid = cfg.grid_size
        self.cell = cfg.render_cell
        self.surf = surface
        self._auto_flip = False

    def cell_rect(self, x: int, y: int) -> pg.Rect:
        c = self.cell
        return pg.Rect(x * c, y * c, c, c)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        gap = 1 if self.cfg.render_grid_lines else 0

        surf.fill(theme.BG)
        for y in range(self._grid):
            for x in range(self._grid):
                pg.draw.rect(surf, theme.EMPTY, self.cell_rect(x, y).inflate(-2 * gap, -2 * gap))

        if s.food is not None:
            pg.draw.rect(surf, theme.FOOD, self.cell_rect(*s.food).inflate(-2 * gap, -2 * gap))

        last = len(s.body) - 1
        for i, (x, y) in enumerate(s.body):
            col = theme.HEAD if i == last else theme.BODY
            pg.draw.rect(surf, col, self.cell_rect(x, y).inflate(-2 * gap, -2 * gap))

        if self.cfg.render_show_hud:
            txt = self._get_font().render(f"Score: {s.score}", True, theme.TEXT)
            surf.blit(txt, (6, 4))

        if self._overlay_text:
            self._draw_overlay(self._overlay_text)

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self._font = None

    # internals
    def _get_font(self) -> pg.font.Font:
        if self._font is None:
            if not pg.font.get_init():
                pg.font.init()
            self._font = pg.font.SysFont(None, 22)
        return self._font

    def _draw_overlay(self, text: str) -> None:
        assert self.surf is not None
        shade = pg.Surface(self.surf.get_size(), pg.SRCALPHA)
        shade.fill(theme.OVERLAY)
        self.surf.blit(shade, (0, 0))
        font = self._get_font()
        lines = text.split("\n")
        cx, cy = self.surf.get_rect().center
        top = cy - (len(lines) * font.get_linesize()) // 2
        for i, line in enumerate(lines):
            img = font.render(line, True, theme.TEXT)
            rect = img.get_rect(center=(cx, top + i * font.get_linesize() + font.get_linesize() // 2))
            self.surf.blit(img, rect)

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        fname = os.path.join(self.cfg.render_record_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
