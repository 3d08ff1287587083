# bouncesnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Protocol, Tuple

Cell = Tuple[int, int]
Command = Tuple[str, Any]  # ("dir", (dx, dy)) or ("speed", delta_ms) or ("quit", None)

class SessionState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"

@dataclass(frozen=True)
class Snapshot:
    segments: Tuple[Cell, ...]   # head first
    apple: Cell
    direction: Tuple[int, int]
    state: SessionState
    tick_count: int
    apples_eaten: int
    tick_interval_ms: int
    board_w: int
    board_h: int
    cell: int

    @property
    def head(self) -> Cell:
        return self.segments[0]

    @property
    def length(self) -> int:
        return len(self.segments)

    @property
    def game_over(self) -> bool:
        return self.state is SessionState.GAME_OVER

class Renderer(Protocol):
    def draw(self, snap: Snapshot) -> None: ...
    def tick(self, fps: int) -> int: ...
    def close(self) -> None: ...

class InputSource(Protocol):
    def poll(self) -> List[Command]: ...
