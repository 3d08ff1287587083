# bouncesnake/core/apple.py
from __future__ import annotations
import random
from typing import Optional
from .interfaces import Cell
from .snake import Snake

class Apple:
    def __init__(self, board_w: int, board_h: int, cell: int, rng: Optional[random.Random] = None):
        self.cell = cell
        self.rng = rng or random.Random()
        self.position: Cell = (0, 0)
        self.generate_new_apple(board_w, board_h)

    def generate_new_apple(self, board_w: int, board_h: int) -> Cell:
        """Pick a uniformly random cell. The snake's body is not excluded."""
        c = self.cell
        self.position = (self.rng.randrange(board_w // c) * c,
                         self.rng.randrange(board_h // c) * c)
        return self.position

    def is_eaten_by(self, snake: Snake) -> bool:
        return snake.head == self.position
