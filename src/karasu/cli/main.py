# src/karasu/cli/main.py
"""
Command line interface for the :mod:`karasu` package.

The report goes to stdout; logging goes to stderr (and optionally a file).
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from karasu.config import AppConfig, apply_dot_overrides, load_app_config
from karasu.game.board import DEFAULT_FRUIT_COUNT, DEFAULT_TOKENS
from karasu.simulation.report import write_report
from karasu.simulation.sweep import run_sweep_from_config
from karasu.simulation.time_karasu import measure_sim_times
from karasu.simulation.watch_game import watch_game
from karasu.utils.logging import LOG_LEVELS, configure_logging, resolve_level

LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="karasu")
    parser.add_argument(
        "--config",
        type=Path,
        action="append",
        default=[],
        help="Path to a YAML overlay (repeatable; later files win)",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override configuration values, e.g. sim.trial_count=1000",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Root logging level (default: logging.level from config, INFO)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # run
    run_parser = sub.add_parser("run", help="Sweep starting counts and strategies; print the report")
    run_parser.add_argument("--trials", type=int, default=None, help="Games per combination")
    run_parser.add_argument("--seed", type=int, default=None, help="Master seed")
    run_parser.add_argument("--jobs", type=int, default=None, help="Worker processes")
    run_parser.add_argument(
        "--strategies",
        default=None,
        help="Comma-separated strategy names (default: random,min,max,first,zero)",
    )

    # watch
    watch_parser = sub.add_parser("watch", help="Log one game roll by roll")
    watch_parser.add_argument("--seed", type=int, default=None, help="Seed for deterministic play")
    watch_parser.add_argument("--fruit", type=int, default=DEFAULT_FRUIT_COUNT, help="Fruit per pile")
    watch_parser.add_argument("--tokens", type=int, default=DEFAULT_TOKENS, help="Karasu tokens")
    watch_parser.add_argument("--strategy", default="random", help="Strategy name")

    # time (benchmark simulation throughput)
    time_parser = sub.add_parser("time", help="Benchmark simulation throughput")
    time_parser.add_argument(
        "--n-games",
        dest="n_games",
        type=int,
        default=1000,
        help="Number of games to run (default: 1000)",
    )
    time_parser.add_argument("--seed", type=int, default=42, help="Seed (default: 42)")
    time_parser.add_argument("--strategy", default="random", help="Strategy name")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _apply_run_flags(cfg: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Let explicit ``run`` flags win over config files and ``--set``."""
    if args.trials is not None:
        cfg.sim.trial_count = args.trials
    if args.seed is not None:
        cfg.sim.seed = args.seed
    if args.jobs is not None:
        cfg.sim.n_jobs = args.jobs
    if args.strategies is not None:
        cfg.sim.strategies = [s.strip() for s in args.strategies.split(",") if s.strip()]
    return cfg


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``karasu`` CLI dispatcher; returns an exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = load_app_config(*args.config) if args.config else AppConfig()
    cfg = apply_dot_overrides(cfg, list(args.overrides or []))

    level = args.log_level if args.log_level is not None else cfg.logging.level
    configure_logging(level=resolve_level(level), log_file=cfg.logging.log_file)

    LOGGER.info(
        "CLI arguments parsed",
        extra={
            "stage": "cli",
            "command": args.command,
            "config_paths": [str(p) for p in args.config],
            "overrides": list(args.overrides or []),
            "log_level": logging.getLevelName(logging.getLogger().level),
        },
    )

    if args.command == "run":
        cfg = _apply_run_flags(cfg, args)
        LOGGER.info(
            "Dispatching run command",
            extra={
                "stage": "cli",
                "command": "run",
                "seed": cfg.sim.seed,
                "trial_count": cfg.sim.trial_count,
                "strategies": list(cfg.sim.strategies),
                "n_jobs": cfg.sim.n_jobs,
            },
        )
        n = write_report(run_sweep_from_config(cfg))
        LOGGER.info("Run command completed", extra={"stage": "cli", "command": "run", "records": n})
    elif args.command == "watch":
        LOGGER.info(
            "Dispatching watch_game",
            extra={"stage": "cli", "command": "watch", "seed": args.seed},
        )
        watch_game(
            seed=args.seed,
            fruit=args.fruit,
            tokens=args.tokens,
            strategy=args.strategy,
            strict=cfg.sim.strict_piles,
        )
    elif args.command == "time":
        LOGGER.info(
            "Dispatching measure_sim_times",
            extra={
                "stage": "cli",
                "command": "time",
                "n_games": args.n_games,
                "seed": args.seed,
            },
        )
        measure_sim_times(n_games=args.n_games, seed=args.seed, strategy=args.strategy)
    else:  # pragma: no cover - argparse enforces valid choices
        parser.error(f"Unknown command {args.command}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
