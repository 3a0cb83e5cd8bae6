# src/karasu/simulation/simulation.py
"""Run Karasu games to completion and count player wins.

Key entry points include:

* ``play_board`` for finishing a board that already exists.
* ``play_one_game`` for a fresh game from initial counts.
* ``run_trials`` for a batch of independent games sharing one RNG stream.
"""

from __future__ import annotations

from karasu.game.board import Board
from karasu.utils.random import RandomSource, make_random_source
from karasu.utils.types import SelectionStrategy

__all__: list[str] = [
    "play_board",
    "play_one_game",
    "run_trials",
]


def play_board(board: Board, strategy: SelectionStrategy) -> bool:
    """Step ``board`` until it is finished and return whether the player won."""
    # every face removes fruit or a token, so this ends almost surely
    while not board.is_finished():
        board.step(strategy)
    return board.player_wins()


def play_one_game(
    initial_fruit_count: int,
    initial_tokens: int,
    strategy: SelectionStrategy,
    *,
    rng: RandomSource | None = None,
    strict: bool = False,
) -> bool:
    """Play a single game on a fresh board.

    Parameters
    ----------
    initial_fruit_count
        Fruit placed in each of the four piles.
    initial_tokens
        Karasu tokens available before the karasu wins.
    strategy
        Selection strategy consulted on the ambiguous face.
    rng
        Random source for the board; ``None`` draws a fresh unseeded one.
    strict
        Forwarded to :class:`~karasu.game.board.Board`.

    Returns
    -------
    bool
        ``True`` if every pile was cleared.
    """
    board = Board.new(initial_fruit_count, initial_tokens, rng=rng, strict=strict)
    return play_board(board, strategy)


def run_trials(
    trial_count: int,
    initial_fruit_count: int,
    initial_tokens: int,
    strategy: SelectionStrategy,
    *,
    rng: RandomSource | None = None,
    strict: bool = False,
) -> tuple[int, int]:
    """Play ``trial_count`` independent games and return ``(wins, total)``.

    The games share nothing except the random stream ``rng``.
    """
    if trial_count < 0:
        raise ValueError(f"trial_count must be non-negative, got {trial_count}")
    if rng is None:
        rng = make_random_source()

    wins = 0
    for _ in range(trial_count):
        if play_one_game(initial_fruit_count, initial_tokens, strategy, rng=rng, strict=strict):
            wins += 1
    return wins, trial_count
