# main.py
import argparse

from config import AppConfig
from runners.run_headless import main as headless
from runners.run_snake import main as snake

def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(description="Snake on a table grid. Arrow keys to move, Esc to quit.")
    p.add_argument("--cols", type=int, default=d.cols)
    p.add_argument("--rows", type=int, default=d.rows)
    p.add_argument("--tick-ms", type=int, default=d.tick_ms)
    p.add_argument("--growth", type=int, default=d.growth)
    p.add_argument("--seed", type=int, default=d.seed)
    p.add_argument("--fps", type=int, default=d.fps)
    p.add_argument("--cell-px", type=int, default=d.render_cell)
    p.add_argument("--no-grid-lines", action="store_true")
    p.add_argument("--no-hud", action="store_true")
    p.add_argument("--record-dir", default=None)
    p.add_argument("--log-path", default=None)
    p.add_argument("--headless", action="store_true",
                   help="no window: play --keys on a manual clock and print each board")
    p.add_argument("--keys", default="",
                   help="headless key script, U/D/L/R press a key, . waits one tick (e.g. \"R...D..\")")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig().with_(
        cols=args.cols,
        rows=args.rows,
        tick_ms=args.tick_ms,
        growth=args.growth,
        seed=args.seed,
        fps=args.fps,
        render_cell=args.cell_px,
        render_grid_lines=not args.no_grid_lines,
        render_show_hud=not args.no_hud,
        render_record_dir=args.record_dir,
        log_path=args.log_path,
    )

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    if args.headless:
        headless(cfg, args.keys)
    else:
        snake(cfg)

if __name__ == "__main__":
    main()
