# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
from dataclasses import replace
import random
from typing import Optional
from .interfaces import Cell, Direction, GameState, Snapshot
from .food import place_food
from config import AppConfig

def new_game(cfg: AppConfig, rng: random.Random, *, high_score: int = 0,
             paused: bool = True) -> GameState:
    snake = (tuple(cfg.start_cell),)
    return GameState(
        snake=snake,
        food=place_food(snake, cfg.grid_size, rng, cfg.max_food_attempts),
        direction=Direction.RIGHT,
        pending=None,
        score=0,
        high_score=high_score,
        speed=cfg.initial_speed_ms,
        paused=paused,
        over=False,
    )

def set_direction(s: GameState, d: Direction) -> GameState:
    # validated against the applied direction, so several presses
    # inside one tick can never add up to a reversal
    if s.over or d is s.direction.opposite:
        return s
    return replace(s, pending=d)

def toggle_pause(s: GameState) -> GameState:
    if s.over:
        return s
    return replace(s, paused=not s.paused)

def restart(s: GameState, cfg: AppConfig, rng: random.Random) -> GameState:
    return new_game(cfg, rng, high_score=s.high_score, paused=False)

def ramp_speed(speed: int, score: int, cfg: AppConfig) -> int:
    """Speed after `score` was reached (checked on the incremented score)."""
    if score > 0 and score % cfg.speed_ramp_every == 0:
        return max(speed - cfg.speed_step_ms, cfg.min_speed_ms)
    return speed

def _game_over(s: GameState, reason: str, *, won: bool = False, **changes) -> GameState:
    return replace(s, over=True, reason=reason, won=won,
                   high_score=max(s.high_score, changes.get("score", s.score)),
                   **changes)

def step(s: GameState, cfg: AppConfig, rng: random.Random) -> GameState:
    """Advance one tick. Paused or finished games are returned unchanged."""
    if not s.running:
        return s

    direction = s.pending or s.direction
    s = replace(s, direction=direction, pending=None, step_count=s.step_count + 1)
    nx, ny = direction.apply(s.head)

    if not (0 <= nx < cfg.grid_size and 0 <= ny < cfg.grid_size):
        return _game_over(s, "wall")
    new_head = (nx, ny)
    if new_head in s.snake:
        return _game_over(s, "self")

    if new_head != s.food:
        return replace(s, snake=(new_head,) + s.snake[:-1])

    snake = (new_head,) + s.snake
    score = s.score + cfg.food_score
    speed = ramp_speed(s.speed, score, cfg)
    food: Optional[Cell] = place_food(snake, cfg.grid_size, rng, cfg.max_food_attempts)
    if food is None:
        return _game_over(s, "board_full", won=True,
                          snake=snake, food=None, score=score, speed=speed)
    return replace(s, snake=snake, food=food, score=score, speed=speed)

def snapshot(s: GameState, cfg: AppConfig) -> Snapshot:
    return Snapshot(
        snake=s.snake,
        food=s.food,
        score=s.score,
        high_score=s.high_score,
        paused=s.paused,
        over=s.over,
        grid_size=cfg.grid_size,
        speed=s.speed,
        reason=s.reason,
        won=s.won,
    )
