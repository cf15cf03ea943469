# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
import numpy as np
from config import AppConfig
from core.interfaces import Snapshot

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3

def board_array(s: Snapshot) -> np.ndarray:
    """(grid, grid) int8 board indexed [y, x]: 0 empty, 1 body, 2 head, 3 food."""
    n = s.grid_size
    grid = np.zeros((n, n), dtype=np.int8)
    if s.food is not None:
        fx, fy = s.food
        grid[fy, fx] = FOOD
    for (x, y) in list(s.snake)[1:]:
        grid[y, x] = BODY
    hx, hy = s.snake[0]
    grid[hy, hx] = HEAD
    return grid

class HeadlessRenderer:
    """Keeps board arrays instead of drawing; lets the game loop run without a window."""
    def __init__(self, keep: Optional[int] = None):
        self.cfg: Optional[AppConfig] = None
        self.frames: List[np.ndarray] = []
        self._keep = keep

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames.clear()

    def draw(self, snap: Snapshot) -> None:
        self.frames.append(board_array(snap))
        if self._keep is not None and len(self.frames) > self._keep:
            del self.frames[0]

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        pass

    def save_frame(self, snap: Snapshot) -> None:
        pass
