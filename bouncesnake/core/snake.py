# bouncesnake/core/snake.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterator, Tuple
from .interfaces import Cell

class Snake:
    """
    Ordered body of grid cells, head at index 0 and tail at the end.

    The snake never dies on a wall: a step that would leave the board
    reflects the offending direction component and the head goes the
    other way instead.
    """
    def __init__(self, start: Cell, cell: int):
        self.cell = cell
        self.segments: Deque[Cell] = deque([start])
        self.direction: Tuple[int, int] = (1, 0)

    @property
    def head(self) -> Cell:
        return self.segments[0]

    @property
    def tail(self) -> Cell:
        return self.segments[-1]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.segments)

    def set_direction(self, dx: int, dy: int) -> None:
        # unconditional: reversing into the neck is allowed
        self.direction = (dx, dy)

    def move(self, board_w: int, board_h: int) -> None:
        hx, hy = self.head
        dx, dy = self.direction
        nx, ny = hx + dx * self.cell, hy + dy * self.cell

        # axes reflect independently, so a corner flips both
        if not 0 <= nx < board_w:
            dx = -dx
            nx = hx + dx * self.cell
        if not 0 <= ny < board_h:
            dy = -dy
            ny = hy + dy * self.cell
        self.direction = (dx, dy)

        self.segments.appendleft((nx, ny))
        self.segments.pop()

    def has_self_collision(self) -> bool:
        head = self.segments[0]
        return any(seg == head for seg in list(self.segments)[1:])

    def grow(self) -> None:
        # the duplicate survives the next move's pop, so length is +1 for good
        self.segments.append(self.tail)
