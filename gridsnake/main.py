# gridsnake/main.py
import argparse
import logging

from gridsnake.config import AppConfig


def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(prog="gridsnake", description="Turn-based grid Snake.")
    p.add_argument("mode", choices=["play", "headless"])
    p.add_argument("--grid-size", type=int, default=d.grid_size)
    p.add_argument("--tick-ms", type=int, default=d.tick_ms)
    p.add_argument("--seed", type=int, default=d.seed)
    p.add_argument("--cell-px", type=int, default=d.render_cell)
    p.add_argument("--grid-lines", action="store_true")
    p.add_argument("--record-dir", default=d.render_record_dir)
    p.add_argument("--games", type=int, default=d.games)
    p.add_argument("--print-board", action="store_true")
    p.add_argument("--checkpoint-dir", default=d.checkpoint_dir)
    p.add_argument("--resume", metavar="TAG", default=d.resume,
                   help="load checkpoint TAG before playing; S saves to it in play mode")
    p.add_argument("--log-dir", default=d.log_dir)
    p.add_argument("--no-log", action="store_true", help="don't write games.csv")
    p.add_argument("--log-level", default=d.log_level)
    return p.parse_args(argv)


def config_from_args(args) -> AppConfig:
    if args.grid_size <= 0:
        raise SystemExit(f"--grid-size must be positive, got {args.grid_size}")
    if args.tick_ms <= 0:
        raise SystemExit(f"--tick-ms must be positive, got {args.tick_ms}")
    return AppConfig().with_(
        grid_size=args.grid_size,
        tick_ms=args.tick_ms,
        seed=args.seed,
        render_cell=args.cell_px,
        render_grid_lines=args.grid_lines,
        render_record_dir=args.record_dir,
        games=max(1, args.games),
        print_board=args.print_board,
        checkpoint_dir=args.checkpoint_dir,
        resume=args.resume,
        log_dir=None if args.no_log else args.log_dir,
        log_level=args.log_level.upper(),
    )


def main(argv=None):
    args = parse_args(argv)
    cfg = config_from_args(args)
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    if args.mode == "play":
        from gridsnake.runners.run_snake import main as play
        play(cfg)
    elif args.mode == "headless":
        from gridsnake.runners.run_headless import main as headless
        headless(cfg)


if __name__ == "__main__":
    main()
