# bouncesnake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
import numpy as np
from bouncesnake.core.interfaces import Snapshot

class HeadlessRenderer:
    """Renderer without a window: keeps drawn snapshots and fakes frame timing."""

    def __init__(self, keep: Optional[int] = None):
        self.keep = keep
        self.frames: List[Snapshot] = []
        self.closed = False

    @property
    def last(self) -> Optional[Snapshot]:
        return self.frames[-1] if self.frames else None

    def draw(self, snap: Snapshot) -> None:
        self.frames.append(snap)
        if self.keep is not None and len(self.frames) > self.keep:
            del self.frames[0]

    def tick(self, fps: int) -> int:
        return 1000 // fps

    def close(self) -> None:
        self.closed = True

    # ---- encodings ----
    @staticmethod
    def encode(s: Snapshot) -> np.ndarray:
        """(rows, cols, 3) occupancy grid: c0 body without head, c1 head, c2 apple."""
        c = s.cell
        grid = np.zeros((s.board_h // c, s.board_w // c, 3), dtype=np.float32)
        for (x, y) in s.segments[1:]:
            grid[y // c, x // c, 0] = 1.0
        hx, hy = s.head
        grid[hy // c, hx // c, 1] = 1.0
        ax, ay = s.apple
        grid[ay // c, ax // c, 2] = 1.0
        return grid

    @staticmethod
    def text(s: Snapshot) -> List[str]:
        """Character board drawn from encode(): A apple, o body, H head (X once dead)."""
        grid = HeadlessRenderer.encode(s)
        board = np.full(grid.shape[:2], ".", dtype="<U1")
        board[grid[:, :, 2] == 1.0] = "A"
        board[grid[:, :, 0] == 1.0] = "o"
        board[grid[:, :, 1] == 1.0] = "X" if s.game_over else "H"
        return ["".join(row) for row in board]
