# bouncesnake/config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board (units are pixels; every position is a multiple of `cell`)
    board_w: int = 800
    board_h: int = 600
    cell: int = 20
    seed: Optional[int] = None

    # speed (ms between ticks)
    tick_ms: int = 100
    min_tick_ms: int = 10
    max_tick_ms: int = 200
    speed_step_ms: int = 40

    # render
    fps: int = 60
    render_title: str = "Snake Game"
    render_show_hud: bool = False

    def __post_init__(self):
        if self.cell <= 0:
            raise ValueError(f"cell must be positive, got {self.cell}")
        for name in ("board_w", "board_h"):
            size = getattr(self, name)
            if size % self.cell != 0:
                raise ValueError(f"{name}={size} is not a multiple of cell={self.cell}")
            # a one-cell axis would reflect straight back out of the board
            if size < 2 * self.cell:
                raise ValueError(f"{name}={size} must hold at least two cells")
        if not (0 < self.min_tick_ms <= self.max_tick_ms):
            raise ValueError(f"bad tick bounds [{self.min_tick_ms}, {self.max_tick_ms}]")
        if not (self.min_tick_ms <= self.tick_ms <= self.max_tick_ms):
            raise ValueError(f"tick_ms={self.tick_ms} outside [{self.min_tick_ms}, {self.max_tick_ms}]")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
