# core/game_loop.py
from __future__ import annotations
import threading, time
from typing import Callable, Optional, Tuple
from .engine import GameEngine

Clock = Callable[[], float]

class TickTimer:
    """
    Cooperative interval timer driven by a polled clock.

    Call poll() as often as you like (every frame). It runs at most one tick
    per call, once `speed` ms have passed since it was armed. Whenever the
    engine's schedule key changes (speed, direction, food, pause, game over)
    the timer is cancelled and armed again from scratch, so a tick always
    sees the parameters that were current when it was scheduled.
    """
    def __init__(self, engine: GameEngine, clock: Clock = time.monotonic):
        self.engine = engine
        self._clock = clock
        self._key: Optional[Tuple] = None
        self._deadline: Optional[float] = None

    @property
    def armed(self) -> bool:
        return self._deadline is not None

    def cancel(self) -> None:
        self._key = None
        self._deadline = None

    def _arm(self, now: float) -> None:
        self._key = self.engine.schedule_key()
        self._deadline = now + self.engine.state.speed / 1000.0

    def time_left(self, now: Optional[float] = None) -> Optional[float]:
        if self._deadline is None:
            return None
        now = self._clock() if now is None else now
        return max(0.0, self._deadline - now)

    def poll(self, now: Optional[float] = None) -> bool:
        """Returns True if a tick ran."""
        now = self._clock() if now is None else now
        if not self.engine.state.running:
            self.cancel()
            return False
        if self._deadline is None or self.engine.schedule_key() != self._key:
            self._arm(now)
            return False
        if now < self._deadline:
            return False

        deadline = self._deadline
        self.engine.tick()
        if not self.engine.state.running:
            self.cancel()
        elif self.engine.schedule_key() == self._key:
            # same parameters: keep the cadence instead of drifting by a frame
            self._deadline = deadline + self.engine.state.speed / 1000.0
            if self._deadline < now:
                self._deadline = now + self.engine.state.speed / 1000.0
        else:
            self._arm(now)
        return True

class BackgroundTicker:
    """Runs a TickTimer on its own thread; the render loop only reads snapshots."""
    def __init__(self, engine: GameEngine, granularity_sec: float = 0.005):
        self._timer = TickTimer(engine)
        self._granularity = max(1e-3, float(granularity_sec))
        self._t: Optional[threading.Thread] = None
        self._stop = threading.Event()
        self._started = False
        self.error: Optional[BaseException] = None

    def start(self) -> None:
        if self._started: return
        self._stop.clear()
        self._t = threading.Thread(target=self._run, name="BackgroundTicker", daemon=True)
        self._t.start()
        self._started = True

    def _run(self) -> None:
        try:
            while not self._stop.is_set():
                self._timer.poll()
                left = self._timer.time_left()
                # wake early enough to notice pause / direction changes
                self._stop.wait(self._granularity if left is None else min(left, self._granularity))
        except Exception as e:
            # kept for the owner to re-raise; the thread just ends
            self.error = e
        finally:
            self._timer.cancel()

    @property
    def running(self) -> bool:
        return self._started and self._t is not None and self._t.is_alive()

    def close(self, timeout: float = 2.0) -> bool:
        """Stop the thread. Returns False if it is still running after `timeout`."""
        if not self._started: return True
        self._stop.set()
        if self._t is not None:
            self._t.join(timeout=timeout)
            if self._t.is_alive():
                return False
        self._t = None
        self._started = False
        return True
