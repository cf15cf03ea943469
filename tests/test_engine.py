# tests/test_engine.py
import threading
from dataclasses import replace

from config import AppConfig
from core.engine import GameEngine
from core.interfaces import Direction

def _started(cfg, **kwargs):
    eng = GameEngine(cfg, **kwargs)
    eng.toggle_pause()
    return eng

def test_engine_starts_paused(cfg):
    eng = GameEngine(cfg)
    snap = eng.snapshot()
    assert snap.paused and not snap.over
    assert snap.snake == ((10, 10),)
    assert snap.score == 0 and snap.high_score == 0
    assert snap.grid_size == 20
    # paused: tick does nothing
    assert eng.tick() == eng.state
    assert eng.snapshot().snake == ((10, 10),)

def test_set_direction_applies_on_tick(cfg):
    eng = _started(cfg)
    eng.set_direction(Direction.DOWN)
    assert eng.state.direction is Direction.RIGHT
    eng.tick()
    assert eng.state.direction is Direction.DOWN
    assert eng.snapshot().snake[0] == (10, 11)

def test_opposite_direction_ignored(cfg):
    eng = _started(cfg)
    before = eng.state
    eng.set_direction(Direction.LEFT)
    assert eng.state == before

def test_game_over_hook_fires_once(cfg):
    seen = []
    eng = _started(cfg, on_game_over=seen.append)
    for _ in range(15):
        eng.tick()
    assert eng.state.over and eng.state.reason == "wall"
    assert len(seen) == 1
    assert seen[0] is eng.state

def test_toggle_pause_ignored_after_game_over(cfg):
    eng = _started(cfg)
    while not eng.state.over:
        eng.tick()
    eng.toggle_pause()
    assert not eng.state.paused
    eng.set_direction(Direction.UP)
    assert eng.state.pending is None

def test_restart_preserves_high_score(cfg):
    eng = _started(cfg.with_(start_cell=(18, 10)))
    # put food directly in front so the first tick scores
    eng._state = replace(eng.state, food=(19, 10))
    eng.tick()
    assert eng.state.score == 10
    eng.tick()  # into the wall
    assert eng.state.over and eng.state.high_score == 10

    eng.restart()
    s = eng.state
    assert s.high_score == 10
    assert s.score == 0 and not s.over and not s.paused
    assert s.snake == ((18, 10),)

def _play(eng, bites):
    """Feed `bites` foods straight ahead, then run into the wall."""
    for _ in range(bites):
        eng._state = replace(eng.state, food=eng.state.direction.apply(eng.state.head))
        eng.tick()
    eng._state = replace(eng.state, food=(0, 0))
    while not eng.state.over:
        eng.tick()
    return eng.state

def test_high_score_never_decreases_across_restarts(cfg):
    eng = _started(cfg)
    scores, highs = [], []
    for bites in (3, 1, 5, 0, 4):
        s = _play(eng, bites)
        scores.append(s.score)
        highs.append(s.high_score)
        eng.restart()
        assert eng.state.high_score == s.high_score
    assert scores == [30, 10, 50, 0, 40]
    assert highs == [30, 30, 50, 50, 50]
    assert all(a <= b for a, b in zip(highs, highs[1:]))

def test_seed_makes_food_reproducible():
    a = GameEngine(AppConfig(seed=99))
    b = GameEngine(AppConfig(seed=99))
    assert a.state.food == b.state.food

def test_schedule_key_changes_with_pause(cfg):
    eng = GameEngine(cfg)
    k = eng.schedule_key()
    eng.toggle_pause()
    assert eng.schedule_key() != k

def test_concurrent_input_and_ticks_keep_state_consistent(cfg):
    eng = _started(cfg)
    stop = threading.Event()

    def press():
        dirs = [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT]
        i = 0
        while not stop.is_set():
            eng.set_direction(dirs[i % 4])
            i += 1

    t = threading.Thread(target=press, daemon=True)
    t.start()
    try:
        for _ in range(500):
            eng.tick()
            snap = eng.snapshot()
            assert len(set(snap.snake)) == len(snap.snake)
            if snap.over:
                eng.restart()
    finally:
        stop.set()
        t.join(timeout=2.0)
