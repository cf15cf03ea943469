# main.py
import argparse

from config import AppConfig
from runners.run_snake import main as snake

def parse_args():
    p = argparse.ArgumentParser(description="Snake: arrows steer, space pauses, R restarts.")
    p.add_argument("--seed", type=int, default=None, help="seed for food placement")
    p.add_argument("--cell", type=int, default=None, help="cell size in pixels")
    p.add_argument("--no-hud", action="store_true", help="hide score / high score strip")
    p.add_argument("--grid-lines", action="store_true")
    p.add_argument("--record-dir", default=None, help="save a PNG per changed frame here")
    p.add_argument("--log-csv", default=None, help="append one row per finished game")
    p.add_argument("--threaded", action="store_true", help="run ticks on a background thread")
    return p.parse_args()

def config_from_args(args) -> AppConfig:
    cfg = AppConfig(seed=args.seed)
    overrides = {
        "render_show_hud": not args.no_hud,
        "render_grid_lines": args.grid_lines,
        "render_record_dir": args.record_dir,
        "log_csv": args.log_csv,
        "threaded": args.threaded,
    }
    if args.cell is not None:
        overrides["render_cell"] = args.cell
    return cfg.with_(**overrides)

def main():
    snake(config_from_args(parse_args()))

if __name__ == "__main__":
    main()
