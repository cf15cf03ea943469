# core/food.py  (pure, seeded by the caller)
from __future__ import annotations
import random
from typing import Iterable, Optional
from .interfaces import Cell

def free_cells(occupied: Iterable[Cell], grid_size: int) -> list[Cell]:
    occ = set(occupied)
    return [(x, y) for y in range(grid_size) for x in range(grid_size) if (x, y) not in occ]

def place_food(occupied: Iterable[Cell], grid_size: int, rng: random.Random,
               max_attempts: int = 1000) -> Optional[Cell]:
    """Pick a uniformly random cell that is not in `occupied`.

    Draws coordinates and re-rolls on a hit. After `max_attempts` misses the
    draw falls back to choosing from the enumerated free cells, which is
    still uniform over the free cells but always terminates.

    Returns None when every cell is occupied.
    """
    occ = set(occupied)
    if len(occ) >= grid_size * grid_size:
        return None

    for _ in range(max_attempts):
        cell = (rng.randrange(grid_size), rng.randrange(grid_size))
        if cell not in occ:
            return cell

    free = free_cells(occ, grid_size)
    return rng.choice(free) if free else None
