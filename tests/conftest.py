# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from config import AppConfig

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    return AppConfig(seed=1234)

@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def state_factory(cfg):
    from core.interfaces import Direction, GameState
    def make(snake=((10, 10),), food=(5, 5), direction=Direction.RIGHT, **kwargs):
        fields = dict(
            snake=tuple(snake),
            food=food,
            direction=direction,
            pending=None,
            score=0,
            high_score=0,
            speed=cfg.initial_speed_ms,
            paused=False,
            over=False,
        )
        fields.update(kwargs)
        return GameState(**fields)
    return make

@pytest.fixture
def screen(cfg):
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    side = cfg.grid_size * cfg.render_cell
    return pg.Surface((side, side + cfg.render_hud_px))
