"""Command-line tools for running and benchmarking headless games."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _add_game_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    p.add_argument("--grid-width", type=_positive_int, default=None)
    p.add_argument("--grid-height", type=_positive_int, default=None)
    p.add_argument("--length", type=_positive_int, default=None)
    p.add_argument(
        "--wall-mode", type=str, default=None, choices=["death", "wrap"],
    )
    p.add_argument("--seed", type=int, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid snake simulation, benchmarking and config tools.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play one headless game with the greedy pilot.",
    )
    _add_game_flags(sim_p)
    sim_p.add_argument("--max-ticks", type=_positive_int, default=1_000)
    sim_p.add_argument(
        "--realtime", action="store_true",
        help="Pace ticks with the session's own tick interval.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure simulation throughput.",
    )
    bench_p.add_argument("--num-games", type=_positive_int, default=100)
    bench_p.add_argument("--grid-width", type=_positive_int, default=20)
    bench_p.add_argument("--grid-height", type=_positive_int, default=20)
    bench_p.add_argument("--max-ticks", type=_positive_int, default=500)
    bench_p.add_argument("--seed", type=int, default=42)

    # --- config ---
    cfg_p = sub.add_parser(
        "config", help="Write a game config file.",
    )
    _add_game_flags(cfg_p)
    cfg_p.add_argument("output", help="Path for the JSON config.")

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    from grid_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    flag_map = {
        "grid_width": "grid_width",
        "grid_height": "grid_height",
        "length": "starting_length",
        "wall_mode": "wall_mode",
        "seed": "seed",
    }
    overrides = {
        cfg_name: getattr(args, cli_name)
        for cli_name, cfg_name in flag_map.items()
        if getattr(args, cli_name, None) is not None
    }
    if overrides:
        # Re-centre the snake when the board size changes.
        if {"grid_width", "grid_height"} & overrides.keys():
            overrides.setdefault("starting_x", None)
            overrides.setdefault("starting_y", None)
        config = dataclasses.replace(config, **overrides)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    import numpy as np

    from grid_snake.autopilot import GreedyPilot
    from grid_snake.runner import run_session
    from grid_snake.session import GameSession

    config = _load_config(args)
    session = GameSession.from_config(config)
    pilot = GreedyPilot(np.random.default_rng(config.seed))

    time_scale = 1.0 if args.realtime else 0.0
    final = asyncio.run(
        run_session(
            session, pilot=pilot, max_ticks=args.max_ticks,
            time_scale=time_scale,
        ),
    )
    print(final.model_dump_json(indent=2))  # noqa: T201
    if session.is_game_over:
        print(session.game_over_message())  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from grid_snake.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_games=args.num_games,
        grid_width=args.grid_width,
        grid_height=args.grid_height,
        max_ticks=args.max_ticks,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _load_config(args)
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "benchmark": _run_benchmark,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
