from __future__ import annotations
import csv, os
from collections import deque
from typing import Deque, Dict, Any, Protocol, Optional, Callable
from .interfaces import GameState

GAME_KEYS = ["game", "score", "high_score", "length", "steps", "speed", "reason", "won"]

class Logger(Protocol):
    def log(self, row: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, row: Dict[str, Any]) -> None:
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(row.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(row)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()

class WindowedStat:
    """Fixed-window mean/min/max."""
    def __init__(self, window: int):
        self.window = window
        self.buf: Deque[float] = deque(maxlen=window)
    def add(self, x: float) -> None:
        self.buf.append(float(x))
    def summary(self) -> Dict[str, float]:
        if not self.buf:
            return {"mean": 0.0, "min": 0.0, "max": 0.0}
        b = list(self.buf)
        return {"mean": sum(b) / len(b), "min": min(b), "max": max(b)}

def make_game_logger(
    *,
    logger: Optional[Logger] = None,
    window: int = 10,
    echo: Callable[[str], None] = print,
) -> Callable[[GameState], None]:
    """
    Returns a function(state: GameState) -> None meant to be passed as the
    engine's on_game_over hook. It prints a one-line summary with the rolling
    mean score and, if a logger is given, appends one row per finished game.
    """
    scores = WindowedStat(window)
    count = 0

    def _on_game_over(s: GameState) -> None:
        nonlocal count
        count += 1
        scores.add(s.score)
        mean = scores.summary()["mean"]
        echo(f"[game {count}] score={s.score} high={s.high_score} len={len(s.snake)} "
             f"reason={s.reason} mean{window}={mean:.1f}")
        if logger is not None:
            logger.log({
                "game": count,
                "score": s.score,
                "high_score": s.high_score,
                "length": len(s.snake),
                "steps": s.step_count,
                "speed": s.speed,
                "reason": s.reason,
                "won": int(s.won),
            })
            logger.flush()

    return _on_game_over
