# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_size: int = 20
    start_cell: Tuple[int, int] = (10, 10)
    seed: Optional[int] = None

    # scoring / difficulty ramp (built in, not user-tunable)
    food_score: int = 10
    initial_speed_ms: int = 150
    min_speed_ms: int = 50
    speed_step_ms: int = 10
    speed_ramp_every: int = 50
    max_food_attempts: int = 1000

    # render
    fps: int = 60                  # frame rate of the window, independent of tick speed
    render_cell: int = 20
    render_hud_px: int = 28
    render_title: str = "Snake"
    render_grid_lines: bool = False
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    # session
    threaded: bool = False         # drive ticks from a background thread
    log_csv: Optional[str] = None  # append finished games here
    stats_window: int = 10


    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
