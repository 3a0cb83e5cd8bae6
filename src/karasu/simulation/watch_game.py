# src/karasu/simulation/watch_game.py
"""
watch_game.py - run a *single* Karasu game with very chatty logging.

It
 • logs the starting board,
 • logs every die face and the board after it,
 • logs every pile pair the strategy picks, and
 • finishes with a tiny summary.

No game-logic is duplicated - we only *wrap* the real board and strategy.
"""

from __future__ import annotations

import logging

from karasu.game.board import (
    AMBIGUOUS_OUTCOME,
    DEFAULT_FRUIT_COUNT,
    DEFAULT_TOKENS,
    TOKEN_OUTCOME,
    Board,
)
from karasu.simulation.strategies import get_strategy
from karasu.utils.random import make_random_source
from karasu.utils.types import PilePair, SelectionStrategy

LOGGER = logging.getLogger(__name__)


def describe_outcome(outcome: int) -> str:
    """Return a short human label for a die face."""
    if outcome == AMBIGUOUS_OUTCOME:
        return "choose two"
    if outcome == TOKEN_OUTCOME:
        return "karasu"
    return f"pile {outcome}"


def trace_strategy(strategy: SelectionStrategy, label: str) -> SelectionStrategy:
    """Wrap ``strategy`` so every pick is logged along with the board it saw."""

    def traced(board: Board) -> PilePair:
        seen = str(board)
        pair = strategy(board)
        LOGGER.info("%s picks %s on %s", label, pair, seen, extra={"stage": "watch"})
        return pair

    return traced


def watch_game(
    *,
    seed: int | None = None,
    fruit: int = DEFAULT_FRUIT_COUNT,
    tokens: int = DEFAULT_TOKENS,
    strategy: str = "random",
    strict: bool = False,
) -> Board:
    """Play one game, logging every step, and return the finished board."""
    traced = trace_strategy(get_strategy(strategy), strategy)
    board = Board.new(fruit, tokens, rng=make_random_source(seed), strict=strict)
    LOGGER.info(
        "Watching game",
        extra={"stage": "watch", "seed": seed, "fruit": fruit, "tokens": tokens, "strategy": strategy},
    )
    LOGGER.info("start  %s", str(board), extra={"stage": "watch"})

    n_steps = 0
    while not board.is_finished():
        outcome = board.step(traced)
        n_steps += 1
        assert outcome is not None  # board was not finished
        LOGGER.info(
            "roll %3d: %d (%s) -> %s",
            n_steps,
            outcome,
            describe_outcome(outcome),
            str(board),
            extra={"stage": "watch"},
        )

    winner = "player" if board.player_wins() else "karasu"
    LOGGER.info(
        "Game over after %d rolls: %s wins",
        n_steps,
        winner,
        extra={"stage": "watch", "winner": winner, "rolls": n_steps},
    )
    return board


__all__ = ["describe_outcome", "trace_strategy", "watch_game"]
