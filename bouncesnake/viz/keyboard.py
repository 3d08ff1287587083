# bouncesnake/viz/keyboard.py
import pygame as pg
from typing import List
from bouncesnake.core.interfaces import Command

DIRECTION_KEYS = {
    pg.K_w: (0, -1),
    pg.K_s: (0, 1),
    pg.K_a: (-1, 0),
    pg.K_d: (1, 0),
}

class Keyboard:
    def __init__(self, speed_step_ms: int = 40):
        self.speed_step_ms = speed_step_ms

    def poll(self) -> List[Command]:
        """Drain the event queue into commands, in arrival order."""
        cmds: List[Command] = []
        for e in pg.event.get():
            if e.type == pg.QUIT:
                cmds.append(("quit", None))
            elif e.type == pg.KEYDOWN:
                if e.key == pg.K_ESCAPE:
                    cmds.append(("quit", None))
                elif e.key in DIRECTION_KEYS:
                    cmds.append(("dir", DIRECTION_KEYS[e.key]))
                elif e.key == pg.K_UP:
                    cmds.append(("speed", -self.speed_step_ms))  # faster
                elif e.key == pg.K_DOWN:
                    cmds.append(("speed", self.speed_step_ms))
        return cmds
