# bouncesnake/runners/autopilot.py
from __future__ import annotations
from typing import List, Tuple
from bouncesnake.core.interfaces import Cell, Command
from bouncesnake.core.session import GameSession

ABS_DIRS: List[Tuple[int, int]] = [(1, 0), (0, 1), (-1, 0), (0, -1)]  # R, D, L, U

def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

class Autopilot:
    """
    Input source for headless runs: steers greedily toward the apple,
    preferring steps that don't land on the body. Walls bounce, so only
    in-board cells are considered.
    """
    def __init__(self, session: GameSession):
        self.session = session

    def poll(self) -> List[Command]:
        snap = self.session.snapshot()
        if snap.game_over:
            return []
        head, c = snap.head, snap.cell
        # the tail moves away this tick unless we eat
        blocked = set(snap.segments[:-1])

        best, best_key = snap.direction, None
        for d in ABS_DIRS:
            nxt = (head[0] + d[0] * c, head[1] + d[1] * c)
            if not (0 <= nxt[0] < snap.board_w and 0 <= nxt[1] < snap.board_h):
                continue
            key = (nxt in blocked, manhattan(nxt, snap.apple), d != snap.direction)
            if best_key is None or key < best_key:
                best, best_key = d, key
        return [("dir", best)]
