# viz/renderer_pygame.py
from __future__ import annotations
import os
import pygame as pg
from typing import Optional, Union
from config import AppConfig
from core.interfaces import Snapshot
import viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

class PygameRenderer:
    def __init__(self):
        self.cell = 20
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._grid = 0
        self._hud_h = 0
        self._frame_idx = 0
        self._font: Optional[pg.font.Font] = None
        self._big_font: Optional[pg.font.Font] = None
        self._last_saved: Optional[Snapshot] = None

    def _configure(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self._grid = cfg.grid_size
        self.cell = cfg.render_cell
        self._hud_h = cfg.render_hud_px if cfg.render_show_hud else 0
        self._frame_idx = 0
        self._font = pg.font.SysFont(None, 22)
        self._big_font = pg.font.SysFont(None, 36)

    def window_size(self) -> tuple[int, int]:
        side = self._grid * self.cell
        return side, side + self._hud_h

    def board_origin(self) -> tuple[int, int]:
        return 0, self._hud_h

    def open(self, cfg: AppConfig) -> None:
        pg.init()
        self._configure(cfg)
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(self.window_size())
        self.clock = pg.time.Clock()
        self._auto_flip = True

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into a caller-owned surface (embedding, tests)."""
        if not pg.get_init():
            pg.init()
        self._configure(cfg)
        self.surf = surface
        self.clock = None  # embedding surface typically controls timing
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell
        ox, oy = self.board_origin()
        side = self._grid * c

        surf.fill(theme.PANEL)
        pg.draw.rect(surf, theme.BG, pg.Rect(ox, oy, side, side))

        if self.cfg.render_grid_lines:
            for i in range(1, self._grid):
                pg.draw.line(surf, theme.GRID, (ox + i * c, oy), (ox + i * c, oy + side - 1))
                pg.draw.line(surf, theme.GRID, (ox, oy + i * c), (ox + side - 1, oy + i * c))

        if s.food is not None:
            fx, fy = s.food
            pg.draw.ellipse(surf, theme.FOOD, pg.Rect(ox + fx * c + 1, oy + fy * c + 1, c - 2, c - 2))

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(ox + x * c, oy + y * c, c - 1, c - 1))

        if self.cfg.render_show_hud:
            self._draw_hud(s)

        if s.over:
            veil = pg.Surface((side, side), pg.SRCALPHA)
            veil.fill(theme.SHADE)
            surf.blit(veil, (ox, oy))
            self._center_text("You Win!" if s.won else "Game Over!", self._big_font, -14)
            self._center_text("Press R to play again", self._font, 16)
        elif s.paused:
            self._center_text("Paused - press Space", self._font, 0, color=theme.TEXT)

        if self._auto_flip:
            pg.display.flip()

        # frames only change on ticks or input, so skip repeats
        if self.cfg.render_record_dir and s != self._last_saved:
            self._save_surface_frame()
            self._last_saved = s

    def _draw_hud(self, s: Snapshot) -> None:
        assert self.surf is not None and self._font is not None
        w, _ = self.window_size()
        score = self._font.render(f"Score: {s.score}", True, theme.SCORE)
        high = self._font.render(f"High Score: {s.high_score}", True, theme.HIGH)
        y = (self._hud_h - score.get_height()) // 2
        self.surf.blit(score, (6, y))
        self.surf.blit(high, (w - high.get_width() - 6, y))

    def _center_text(self, text: str, font: pg.font.Font, dy: int, color=theme.OVERLAY_TEXT) -> None:
        assert self.surf is not None
        ox, oy = self.board_origin()
        side = self._grid * self.cell
        img = font.render(text, True, color)
        rect = img.get_rect(center=(ox + side // 2, oy + side // 2 + dy))
        self.surf.blit(img, rect)

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

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
