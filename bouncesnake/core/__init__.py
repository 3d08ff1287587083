# bouncesnake/core/__init__.py  (pure simulation, no pygame)
from .interfaces import Cell, SessionState, Snapshot
from .snake import Snake
from .apple import Apple
from .session import GameSession

__all__ = ["Cell", "SessionState", "Snapshot", "Snake", "Apple", "GameSession"]
