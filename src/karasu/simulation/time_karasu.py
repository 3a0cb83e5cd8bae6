# src/karasu/simulation/time_karasu.py
"""
Timing helpers for a single game and for a batch of N games.  Useful for
choosing a trial count and worker count before launching a full sweep.
"""

import logging
import time

from karasu.game.board import DEFAULT_FRUIT_COUNT, DEFAULT_TOKENS
from karasu.simulation.simulation import play_one_game, run_trials
from karasu.simulation.strategies import get_strategy
from karasu.utils.random import make_random_source

LOGGER = logging.getLogger(__name__)


def measure_sim_times(
    *,
    n_games: int = 1000,
    seed: int = 42,
    strategy: str = "random",
    fruit: int = DEFAULT_FRUIT_COUNT,
    tokens: int = DEFAULT_TOKENS,
) -> float:
    """Benchmark single-game and batch simulation performance.

    Inputs:
        n_games: Number of games to run in the batch benchmark.
        seed: Seed used for simulation reproducibility.
        strategy: Registered strategy name used for every game.
        fruit, tokens: Starting counts for every board.

    Returns:
        Games per second achieved by the batch.  Logging output captures the
        timings and win counts.
    """

    pick = get_strategy(strategy)
    LOGGER.info(
        "Simulation timing start",
        extra={
            "stage": "simulation",
            "benchmark": "time_karasu",
            "seed": seed,
            "n_games": n_games,
            "strategy": strategy,
        },
    )

    t0 = time.perf_counter()
    won = play_one_game(fruit, tokens, pick, rng=make_random_source(seed))
    t1 = time.perf_counter()
    LOGGER.info(
        "Single game benchmark",
        extra={
            "stage": "simulation",
            "benchmark": "single_game",
            "seed": seed,
            "elapsed_s": t1 - t0,
            "player_wins": won,
        },
    )

    t0 = time.perf_counter()
    wins, total = run_trials(n_games, fruit, tokens, pick, rng=make_random_source(seed))
    t1 = time.perf_counter()
    elapsed = t1 - t0
    gps = (total / elapsed) if elapsed > 0 else 0.0
    LOGGER.info(
        "Batch benchmark",
        extra={
            "stage": "simulation",
            "benchmark": "batch",
            "seed": seed,
            "n_games": total,
            "elapsed_s": elapsed,
            "games_per_sec": gps,
            "player_wins": wins,
        },
    )
    return gps


__all__ = ["measure_sim_times"]
