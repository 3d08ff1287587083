# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable when running from a plain checkout
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from collections import deque

import pygame as pg
import pytest

from bouncesnake.config import AppConfig
from bouncesnake.core.session import GameSession

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((200, 100), pg.SRCALPHA)

class ScriptedRng:
    """Stands in for random.Random; randrange returns queued values in order."""
    def __init__(self, values):
        self.values = iter(values)

    def randrange(self, n):
        v = next(self.values)
        assert 0 <= v < n
        return v

@pytest.fixture
def scripted_rng():
    return ScriptedRng

@pytest.fixture
def cfg():
    return AppConfig(seed=1234)

@pytest.fixture
def session_factory(cfg):
    def make(segments=None, direction=None, apple=None, rng=None, **overrides):
        s = GameSession(cfg.with_(**overrides) if overrides else cfg, rng=rng)
        if segments is not None:
            s.snake.segments = deque(segments)
        if direction is not None:
            s.snake.direction = direction
        if apple is not None:
            s.apple.position = apple
        return s
    return make
