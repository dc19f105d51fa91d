"""Command-line entry point for Grid Snake."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Classic grid snake: play in a window or benchmark headless.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open a window and play.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; flags below override it.",
    )
    play_p.add_argument("--grid-width", type=int, default=None)
    play_p.add_argument("--grid-height", type=int, default=None)
    play_p.add_argument("--cell-size", type=int, default=None)
    play_p.add_argument("--frames-per-tick", type=int, default=None)
    play_p.add_argument("--fps", type=int, default=None)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument(
        "--sprite-sheet", type=str, default=None,
        help="PNG tile sheet; flat colours are used when omitted.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure simulation throughput with random play.",
    )
    bench_p.add_argument("--games", type=int, default=100)
    bench_p.add_argument("--max-ticks", type=int, default=1_000)
    bench_p.add_argument("--seed", type=int, default=42)
    bench_p.add_argument("--grid-width", type=int, default=None)
    bench_p.add_argument("--grid-height", type=int, default=None)

    return parser


def _load_config(args: argparse.Namespace):
    from grid_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()
    return config.replace(
        grid_width=args.grid_width,
        grid_height=args.grid_height,
        cell_size_px=args.cell_size,
        frames_per_tick=args.frames_per_tick,
        fps=args.fps,
        seed=args.seed,
        sprite_sheet=args.sprite_sheet,
    )


def _run_play(args: argparse.Namespace) -> int:
    from grid_snake.render import SpriteSheetError, run

    try:
        config = _load_config(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    try:
        return run(config)
    except SpriteSheetError as exc:
        logger.error("%s", exc)
        return 2


def _run_benchmark(args: argparse.Namespace) -> int:
    from grid_snake.benchmark import benchmark_throughput
    from grid_snake.config import GameConfig

    try:
        config = GameConfig().replace(
            grid_width=args.grid_width, grid_height=args.grid_height,
        )
        result = benchmark_throughput(
            config,
            num_games=args.games,
            max_ticks=args.max_ticks,
            seed=args.seed,
        )
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
