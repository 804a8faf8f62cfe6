"""Command-line entry point for Smooth Snake."""

from __future__ import annotations

import argparse
import logging
import sys

from smooth_snake.config import GameConfig

logger = logging.getLogger(__name__)

# CLI flag -> GameConfig field.
_CONFIG_FLAGS = {
    "field_size": "field_size",
    "segment_width": "segment_width",
    "start_length": "start_length",
    "speed_factor": "speed_factor",
}


def _add_config_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags below override it).",
    )
    parser.add_argument("--field-size", type=float, default=None)
    parser.add_argument("--segment-width", type=float, default=None)
    parser.add_argument("--start-length", type=int, default=None)
    parser.add_argument("--speed-factor", type=float, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smooth-snake",
        description="Smooth Snake game, headless simulation, and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open the game window.")
    _add_config_flags(play_p)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument(
        "--fps", type=int, default=0,
        help="Frame rate cap; 0 leaves it uncapped.",
    )

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play headless with random key presses.",
    )
    _add_config_flags(sim_p)
    sim_p.add_argument("--ticks", type=int, default=1_000)
    sim_p.add_argument("--dt", type=float, default=1 / 60)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--turn-probability", type=float, default=0.05)

    # --- config ---
    config_p = sub.add_parser("config", help="Write a config file.")
    _add_config_flags(config_p)
    config_p.add_argument("output", help="Path of the JSON file to write.")

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    for cli_name, cfg_name in _CONFIG_FLAGS.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from smooth_snake.app import run

    return run(_resolve_config(args), seed=args.seed, fps=args.fps)


def _run_simulate(args: argparse.Namespace) -> int:
    from smooth_snake.simulation import run_headless

    result = run_headless(
        ticks=args.ticks,
        dt=args.dt,
        seed=args.seed,
        config=_resolve_config(args),
        turn_probability=args.turn_probability,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    _resolve_config(args).save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``smooth-snake`` CLI."""
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
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
