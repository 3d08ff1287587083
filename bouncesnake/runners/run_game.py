# bouncesnake/runners/run_game.py
from __future__ import annotations
import logging
from typing import Optional
from bouncesnake.config import AppConfig
from bouncesnake.core.interfaces import InputSource, Renderer, Snapshot
from bouncesnake.core.session import GameSession

logger = logging.getLogger(__name__)

class GameLoop:
    """
    Fixed-rate scheduler around a GameSession.

    Every frame it polls input, waits one frame through the renderer and
    ticks the session once the current interval has elapsed. Frames run
    at cfg.fps, so intervals shorter than a frame tick once per frame.
    """
    def __init__(self, session: GameSession, renderer: Renderer,
                 inputs: InputSource, cfg: AppConfig):
        self.session = session
        self.renderer = renderer
        self.inputs = inputs
        self.cfg = cfg
        self.frames = 0
        self._elapsed_ms = 0
        self._quit = False

    def handle(self, cmd) -> None:
        kind, payload = cmd
        if kind == "quit":
            self._quit = True
        elif kind == "dir":
            self.session.set_direction(*payload)
        elif kind == "speed":
            self.session.adjust_speed(payload)

    def step(self) -> Snapshot:
        """One frame: input, wait, maybe tick, draw."""
        for cmd in self.inputs.poll():
            self.handle(cmd)

        try:
            self._elapsed_ms += self.renderer.tick(self.cfg.fps)
        except InterruptedError:
            logger.warning("frame wait interrupted, continuing")

        if self._elapsed_ms >= self.session.tick_interval_ms:
            snap = self.session.tick()
            self._elapsed_ms -= self.session.tick_interval_ms
            # don't burst-tick to catch up after a stall
            if self._elapsed_ms >= self.session.tick_interval_ms:
                self._elapsed_ms = 0
        else:
            snap = self.session.snapshot()

        self.renderer.draw(snap)
        self.frames += 1
        return snap

    def run(self, max_frames: Optional[int] = None) -> Snapshot:
        snap = self.session.snapshot()
        try:
            while not self._quit:
                if max_frames is not None and self.frames >= max_frames:
                    break
                snap = self.step()
        finally:
            self.renderer.close()
        logger.info("loop finished after %d frames (state=%s, length=%d)",
                    self.frames, snap.state.value, snap.length)
        return snap


def main(cfg: AppConfig, headless: bool = False, max_frames: Optional[int] = None) -> Snapshot:
    session = GameSession(cfg)
    if headless:
        from bouncesnake.viz.renderer_headless import HeadlessRenderer
        from bouncesnake.runners.autopilot import Autopilot
        snap = GameLoop(session, HeadlessRenderer(keep=1), Autopilot(session), cfg).run(max_frames=max_frames)
        logger.info("final board:\n%s", "\n".join(HeadlessRenderer.text(snap)))
        return snap

    from bouncesnake.viz.renderer_pygame import PygameRenderer
    from bouncesnake.viz.keyboard import Keyboard
    renderer = PygameRenderer()
    try:
        renderer.open(cfg)
    except BaseException:
        renderer.close()
        raise
    return GameLoop(session, renderer, Keyboard(cfg.speed_step_ms), cfg).run(max_frames=max_frames)
