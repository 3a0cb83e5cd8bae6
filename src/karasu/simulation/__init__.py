"""Simulation layer: strategies, game runner, sweeps and reporting."""

from __future__ import annotations

from .simulation import play_board, play_one_game, run_trials
from .strategies import STRATEGIES, candidate_piles, get_strategy, resolve_strategies
from .sweep import OutcomeRecord, outcomes_frame, run_sweep

__all__ = [
    "STRATEGIES",
    "OutcomeRecord",
    "candidate_piles",
    "get_strategy",
    "outcomes_frame",
    "play_board",
    "play_one_game",
    "resolve_strategies",
    "run_sweep",
    "run_trials",
]
