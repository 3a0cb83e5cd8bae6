# src/karasu/simulation/strategies.py
"""Pile-selection strategies for the ambiguous die face.

Each strategy is a plain callable ``Board -> (pile, pile)`` that reads the
board and names the two piles to take fruit from.  Strategies never mutate
the board.  :data:`STRATEGIES` keeps them in their canonical report order.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping

from karasu.game.board import PILE_COUNT
from karasu.utils.types import PilePair, SelectionStrategy

if TYPE_CHECKING:
    from karasu.game.board import Board

__all__: list[str] = [
    "candidate_piles",
    "random_strategy",
    "min_strategy",
    "max_strategy",
    "first_strategy",
    "zero_strategy",
    "STRATEGIES",
    "DEFAULT_STRATEGY_NAMES",
    "get_strategy",
    "resolve_strategies",
]


def candidate_piles(board: Board) -> list[int]:
    """Return indices of non-empty piles in index order, or ``[0]`` if none."""
    candidates = [i for i in range(PILE_COUNT) if board.piles[i] > 0]
    return candidates or [0]


# ---------------------------------------------------------------------------
# Concrete strategies
# ---------------------------------------------------------------------------


def random_strategy(board: Board) -> PilePair:
    """Two independent uniform draws from the candidates (repeats allowed)."""
    candidates = candidate_piles(board)
    first = candidates[board.rng.next_int_below(len(candidates))]
    second = candidates[board.rng.next_int_below(len(candidates))]
    return first, second


def min_strategy(board: Board) -> PilePair:
    """Hit the smallest non-empty pile twice; ties go to the lowest index."""
    # min() keeps the first of equal keys
    pick = min(candidate_piles(board), key=lambda i: board.piles[i])
    return pick, pick


def max_strategy(board: Board) -> PilePair:
    """Hit the largest pile twice; ties go to the lowest index."""
    pick = max(candidate_piles(board), key=lambda i: board.piles[i])
    return pick, pick


def first_strategy(board: Board) -> PilePair:
    pick = candidate_piles(board)[0]
    return pick, pick


def zero_strategy(board: Board) -> PilePair:  # noqa: ARG001
    return 0, 0


STRATEGIES: Mapping[str, SelectionStrategy] = {
    "random": random_strategy,
    "min": min_strategy,
    "max": max_strategy,
    "first": first_strategy,
    "zero": zero_strategy,
}

DEFAULT_STRATEGY_NAMES: tuple[str, ...] = tuple(STRATEGIES)


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------


def get_strategy(name: str) -> SelectionStrategy:
    """Return the strategy registered under ``name``.

    Raises
    ------
    ValueError
        If ``name`` is not a known strategy.
    """
    try:
        return STRATEGIES[name]
    except KeyError:
        known = ", ".join(STRATEGIES)
        raise ValueError(f"Unknown strategy {name!r}; expected one of: {known}") from None


def resolve_strategies(names: Iterable[str] | None = None) -> list[tuple[str, SelectionStrategy]]:
    """Return ``(name, strategy)`` pairs in the order given.

    ``None`` selects every registered strategy in canonical order.
    """
    if names is None:
        names = DEFAULT_STRATEGY_NAMES
    resolved = [(name, get_strategy(name)) for name in names]
    if not resolved:
        raise ValueError("at least one strategy name is required")
    return resolved
