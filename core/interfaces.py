# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional

Cell = Tuple[int, int]

class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Cell:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def apply(self, cell: Cell) -> Cell:
        dx, dy = self.value
        return (cell[0] + dx, cell[1] + dy)

@dataclass(frozen=True)
class GameState:
    snake: Tuple[Cell, ...]             # head first
    food: Optional[Cell]                # None only once the board is full
    direction: Direction
    pending: Optional[Direction]        # consumed at the start of the next tick
    score: int
    high_score: int
    speed: int                          # tick interval in ms
    paused: bool
    over: bool
    reason: str | None = None           # "wall" | "self" | "board_full"
    won: bool = False
    step_count: int = 0

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def running(self) -> bool:
        return not (self.paused or self.over)

@dataclass(frozen=True)
class Snapshot:
    """What a renderer is allowed to see."""
    snake: Tuple[Cell, ...]             # head first
    food: Optional[Cell]
    score: int
    high_score: int
    paused: bool
    over: bool
    grid_size: int
    speed: int
    reason: str | None = None
    won: bool = False
