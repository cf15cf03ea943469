# runners/run_snake.py
from __future__ import annotations
import time
from typing import Callable, List, Optional
from config import AppConfig
from core.engine import GameEngine
from core.game_log import CSVLogger, GAME_KEYS, make_game_logger
from core.game_loop import BackgroundTicker, TickTimer
from core.interfaces import Direction
from viz.keyboard import Command, Keyboard
from viz.render_iface import Renderer

def apply_command(engine: GameEngine, cmd: Command) -> bool:
    """Feed one input command to the engine. Returns False on quit."""
    if cmd == "quit":
        return False
    if isinstance(cmd, Direction):
        engine.set_direction(cmd)
    elif cmd == "pause":
        engine.toggle_pause()
    elif cmd == "restart":
        engine.restart()
    return True

def run(
    cfg: AppConfig,
    renderer: Renderer,
    poll: Callable[[], List[Command]],
    *,
    clock: Callable[[], float] = time.monotonic,
    max_frames: Optional[int] = None,
) -> GameEngine:
    logger = CSVLogger(cfg.log_csv, fieldnames=GAME_KEYS) if cfg.log_csv else None
    engine = GameEngine(cfg, on_game_over=make_game_logger(logger=logger, window=cfg.stats_window))

    ticker = BackgroundTicker(engine) if cfg.threaded else None
    timer = None if ticker else TickTimer(engine, clock=clock)

    try:
        renderer.open(cfg)
        if ticker:
            ticker.start()
        frame = 0
        running = True
        while running and (max_frames is None or frame < max_frames):
            for cmd in poll():
                if not apply_command(engine, cmd):
                    running = False
                    break
            if not running:
                break
            if ticker and ticker.error is not None:
                raise ticker.error
            if timer:
                timer.poll()
            renderer.draw(engine.snapshot())
            renderer.tick(cfg.fps)
            frame += 1
    finally:
        # a ticker that failed to stop may still be inside the game-over hook
        stopped = ticker.close() if ticker else True
        if timer:
            timer.cancel()
        if logger and stopped:
            logger.close()
        renderer.close()
    return engine

def main(cfg: Optional[AppConfig] = None):
    from viz.renderer_pygame import PygameRenderer

    cfg = cfg or AppConfig()
    engine = run(cfg, PygameRenderer(), Keyboard().poll)
    print(f"session high score: {engine.state.high_score}")
