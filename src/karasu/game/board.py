"""board.py
===========
Board state and single-roll transition for Karasu simulations.

High-level flow
---------------
* Four fruit piles start with the same count; the karasu tokens start
  with their own count.
* Every Board.step rolls one six-sided die:
  faces 0-3 take a fruit from that pile, face 4 lets the strategy name
  two piles to take from (one after the other), face 5 spends a token.
* The player wins once every pile is empty; the karasu wins once the
  tokens run out.  The player check runs first.

Randomness lives inside each Board via its RandomSource (passed in from
the outer simulation layer), so the module keeps no global state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from karasu.utils.random import NumpyRandomSource, RandomSource
from karasu.utils.types import PileCounts, SelectionStrategy

__all__ = [
    "PILE_COUNT",
    "DIE_FACES",
    "AMBIGUOUS_OUTCOME",
    "TOKEN_OUTCOME",
    "DEFAULT_FRUIT_COUNT",
    "DEFAULT_TOKENS",
    "InvalidPileIndex",
    "Board",
]

PILE_COUNT: int = 4
DIE_FACES: int = 6
AMBIGUOUS_OUTCOME: int = 4  # strategy picks two piles
TOKEN_OUTCOME: int = 5  # karasu advances

DEFAULT_FRUIT_COUNT: int = 10
DEFAULT_TOKENS: int = 9


class InvalidPileIndex(IndexError):
    """Raised by a strict board when a pile index falls outside ``[0, 4)``."""

    def __init__(self, index: int) -> None:
        super().__init__(f"pile index {index!r} is outside [0, {PILE_COUNT})")
        self.index = index


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class Board:
    """Complete state of one Karasu game.

    Parameters
    ----------
    piles
        Remaining fruit in each of the four piles, indexed 0-3.
    tokens
        Remaining karasu tokens.
    rng
        Source of die rolls (and of choices made by the ``random`` strategy).
    strict
        When ``True`` an out-of-range pile index raises
        :class:`InvalidPileIndex` instead of being ignored.
    """

    piles: list[int]
    tokens: int
    rng: RandomSource = field(default_factory=NumpyRandomSource, repr=False)
    strict: bool = False

    @classmethod
    def new(
        cls,
        initial_fruit_count: int = DEFAULT_FRUIT_COUNT,
        initial_tokens: int = DEFAULT_TOKENS,
        *,
        rng: RandomSource | None = None,
        strict: bool = False,
    ) -> "Board":
        """Return a board with every pile set to ``initial_fruit_count``."""
        return cls(
            piles=[initial_fruit_count] * PILE_COUNT,
            tokens=initial_tokens,
            rng=rng if rng is not None else NumpyRandomSource(),
            strict=strict,
        )

    # ----------------------------- queries -----------------------------
    def player_wins(self) -> bool:
        return all(count == 0 for count in self.piles)

    def adversary_wins(self) -> bool:
        return self.tokens == 0

    def is_finished(self) -> bool:
        return self.player_wins() or self.adversary_wins()

    def snapshot(self) -> tuple[PileCounts, int]:
        """Return an immutable copy of ``(piles, tokens)``."""
        a, b, c, d = self.piles
        return (a, b, c, d), self.tokens

    # --------------------------- transitions ---------------------------
    def decrement_pile(self, index: int) -> bool:
        """Take one fruit from pile ``index``.

        Returns ``True`` if a fruit was removed.  Empty piles are left alone,
        as are out-of-range indices unless the board is strict.
        """
        if not 0 <= index < PILE_COUNT:
            if self.strict:
                raise InvalidPileIndex(index)
            return False
        if self.piles[index] == 0:
            return False
        self.piles[index] -= 1
        return True

    def step(self, strategy: SelectionStrategy) -> int | None:
        """Roll the die once and apply the outcome.

        Returns the face rolled, or ``None`` if the game was already over and
        nothing happened.
        """
        if self.is_finished():
            return None

        outcome = self.rng.next_int_below(DIE_FACES)
        if 0 <= outcome < PILE_COUNT:
            self.decrement_pile(outcome)
        elif outcome == AMBIGUOUS_OUTCOME:
            first, second = strategy(self)
            # sequential: the second pick sees the first one applied
            self.decrement_pile(first)
            self.decrement_pile(second)
        elif outcome == TOKEN_OUTCOME:
            self.tokens -= 1
        else:
            raise ValueError(f"random source returned {outcome!r}; expected 0..{DIE_FACES - 1}")
        return outcome

    def __str__(self) -> str:
        return f"F: {','.join(str(c) for c in self.piles)} K: {self.tokens}"
