# viz/keyboard.py
from __future__ import annotations
from typing import Iterable, List, Optional, Union
import pygame as pg
from core.interfaces import Direction

Command = Union[Direction, str]   # a Direction, or "pause" / "restart" / "quit"

KEYMAP = {
    pg.K_UP: Direction.UP,
    pg.K_DOWN: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT,
    pg.K_SPACE: "pause",
    pg.K_r: "restart",
    pg.K_RETURN: "restart",
    pg.K_ESCAPE: "quit",
}

class Keyboard:
    def translate(self, e: pg.event.Event) -> Optional[Command]:
        if e.type == pg.QUIT:
            return "quit"
        if e.type == pg.KEYDOWN:
            return KEYMAP.get(e.key)
        return None

    def commands(self, events: Iterable[pg.event.Event]) -> List[Command]:
        out = []
        for e in events:
            cmd = self.translate(e)
            if cmd is not None:
                out.append(cmd)
        return out

    def poll(self) -> List[Command]:
        return self.commands(pg.event.get())
