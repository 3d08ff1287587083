# bouncesnake/core/session.py  (pure rules, no pygame)
from __future__ import annotations
import logging
import random
from typing import Optional, Tuple
from bouncesnake.config import AppConfig
from .interfaces import SessionState, Snapshot
from .snake import Snake
from .apple import Apple

logger = logging.getLogger(__name__)

class GameSession:
    """One game from start to game over. Owns exactly one Snake and one Apple."""

    def __init__(self, cfg: AppConfig, rng: Optional[random.Random] = None):
        self.cfg = cfg
        self.rng = rng or random.Random(cfg.seed)
        c = cfg.cell
        start = ((cfg.board_w // 2) // c * c, (cfg.board_h // 2) // c * c)
        self.snake = Snake(start, c)
        self.apple = Apple(cfg.board_w, cfg.board_h, c, self.rng)
        self.state = SessionState.RUNNING
        self.tick_interval_ms = cfg.tick_ms
        self.tick_count = 0
        self.apples_eaten = 0
        self._pending_dir: Optional[Tuple[int, int]] = None
        logger.info("session started: board=%dx%d cell=%d head=%s apple=%s",
                    cfg.board_w, cfg.board_h, c, start, self.apple.position)

    @property
    def game_over(self) -> bool:
        return self.state is SessionState.GAME_OVER

    # ---- input ----
    def set_direction(self, dx: int, dy: int) -> None:
        """Queue a direction for the next tick; the latest call wins."""
        if self.game_over:
            return
        self._pending_dir = (dx, dy)

    def adjust_speed(self, delta_ms: int) -> int:
        """Shift the tick interval by delta_ms, clamped to the configured bounds."""
        if self.game_over:
            return self.tick_interval_ms
        old = self.tick_interval_ms
        self.tick_interval_ms = max(self.cfg.min_tick_ms,
                                    min(old + delta_ms, self.cfg.max_tick_ms))
        if self.tick_interval_ms != old:
            logger.debug("tick interval %d -> %d ms", old, self.tick_interval_ms)
        return self.tick_interval_ms

    # ---- simulation ----
    def tick(self) -> Snapshot:
        if self.game_over:
            return self.snapshot()

        if self._pending_dir is not None:
            self.snake.set_direction(*self._pending_dir)
            self._pending_dir = None

        self.snake.move(self.cfg.board_w, self.cfg.board_h)
        self.tick_count += 1

        if self.snake.has_self_collision():
            self.state = SessionState.GAME_OVER
            logger.info("game over at tick %d: length=%d apples=%d",
                        self.tick_count, len(self.snake), self.apples_eaten)
        elif self.apple.is_eaten_by(self.snake):
            self.snake.grow()
            self.apples_eaten += 1
            eaten_at = self.apple.position
            self.apple.generate_new_apple(self.cfg.board_w, self.cfg.board_h)
            logger.debug("apple eaten at %s, respawned at %s (length=%d)",
                         eaten_at, self.apple.position, len(self.snake))
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            segments=tuple(self.snake.segments),
            apple=self.apple.position,
            direction=self.snake.direction,
            state=self.state,
            tick_count=self.tick_count,
            apples_eaten=self.apples_eaten,
            tick_interval_ms=self.tick_interval_ms,
            board_w=self.cfg.board_w,
            board_h=self.cfg.board_h,
            cell=self.cfg.cell,
        )
