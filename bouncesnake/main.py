# bouncesnake/main.py
import argparse
import logging

from bouncesnake.config import AppConfig
from bouncesnake.runners.run_game import main as run_game

def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(prog="bouncesnake", description="Snake that bounces off walls.")
    p.add_argument("--width", type=int, default=d.board_w)
    p.add_argument("--height", type=int, default=d.board_h)
    p.add_argument("--cell", type=int, default=d.cell)
    p.add_argument("--tick-ms", type=int, default=d.tick_ms)
    p.add_argument("--fps", type=int, default=d.fps)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--hud", action="store_true", help="show length and tick interval")
    p.add_argument("--headless", action="store_true", help="no window; the autopilot plays")
    p.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig().with_(
        board_w=args.width,
        board_h=args.height,
        cell=args.cell,
        tick_ms=args.tick_ms,
        fps=args.fps,
        seed=args.seed,
        render_show_hud=args.hud,
    )

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        cfg = build_config(args)
    except ValueError as e:
        raise SystemExit(f"bouncesnake: {e}")
    frames = args.frames
    if args.headless and frames is None:
        frames = 10_000
    run_game(cfg, headless=args.headless, max_frames=frames)

if __name__ == "__main__":
    main()
