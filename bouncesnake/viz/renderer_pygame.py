# bouncesnake/viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional
from bouncesnake.config import AppConfig
from bouncesnake.core.interfaces import Snapshot
import bouncesnake.viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._font: Optional[pg.font.Font] = None
        self._big_font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.board_w, cfg.board_h))
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._load_fonts()

    def attach_surface(self, cfg: AppConfig, surface: pg.Surface) -> None:
        """Draw into a caller-owned surface; the caller controls flipping and timing."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.surf = surface
        self.clock = None
        self._auto_flip = False
        self._load_fonts()

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = s.cell

        surf.fill(theme.BG)

        if s.game_over:
            txt = self._big_font.render("Game Over", True, theme.GAME_OVER)
            surf.blit(txt, (s.board_w // 2 - 100, s.board_h // 2 - txt.get_height()))
        else:
            for (x, y) in s.segments:
                pg.draw.rect(surf, theme.SNAKE, pg.Rect(x, y, c, c))
            ax, ay = s.apple
            pg.draw.rect(surf, theme.APPLE, pg.Rect(ax, ay, c, c))

        if self.cfg.render_show_hud:
            hud = self._font.render(
                f"Length: {s.length}   Apples: {s.apples_eaten}   Tick: {s.tick_interval_ms} ms",
                True, theme.TEXT
            )
            surf.blit(hud, (6, 4))

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> int:
        """Wait out the frame; returns elapsed milliseconds since the last call."""
        if self.clock:
            return self.clock.tick(fps)
        return 1000 // fps

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _load_fonts(self) -> None:
        self._font = pg.font.SysFont(None, 22)
        self._big_font = pg.font.SysFont("arial", 30, bold=True)
