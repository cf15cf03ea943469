# core/engine.py
from __future__ import annotations
import random
import threading
from typing import Callable, Optional, Tuple
from . import snake_rules as rules
from .interfaces import Direction, GameState, Snapshot
from config import AppConfig

GameOverHook = Callable[[GameState], None]

class GameEngine:
    """
    Stateful front for the pure rules in snake_rules.

    Every mutation goes through one lock, so input handlers, a timer and a
    background ticker can all call in without tearing the state. Readers get
    a frozen Snapshot.
    """
    def __init__(self, cfg: AppConfig, on_game_over: Optional[GameOverHook] = None):
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self._lock = threading.RLock()
        self._on_game_over = on_game_over
        self._state = rules.new_game(cfg, self.rng)

    @property
    def state(self) -> GameState:
        return self._state

    # ---- commands ----
    def set_direction(self, d: Direction) -> None:
        with self._lock:
            self._state = rules.set_direction(self._state, d)

    def toggle_pause(self) -> None:
        with self._lock:
            self._state = rules.toggle_pause(self._state)

    def restart(self) -> None:
        with self._lock:
            self._state = rules.restart(self._state, self.cfg, self.rng)

    def tick(self) -> GameState:
        with self._lock:
            prev = self._state
            self._state = rules.step(prev, self.cfg, self.rng)
            ended = self._state.over and not prev.over
            cur = self._state
        if ended and self._on_game_over is not None:
            self._on_game_over(cur)
        return cur

    # ---- reads ----
    def snapshot(self) -> Snapshot:
        with self._lock:
            return rules.snapshot(self._state, self.cfg)

    def schedule_key(self) -> Tuple:
        """Everything a pending tick timer depends on; a change re-arms it."""
        s = self._state
        return (s.speed, s.direction, s.food, s.paused, s.over)
