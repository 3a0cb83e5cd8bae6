"""Game state for a single Karasu board."""

from __future__ import annotations

from .board import (
    AMBIGUOUS_OUTCOME,
    DEFAULT_FRUIT_COUNT,
    DEFAULT_TOKENS,
    DIE_FACES,
    PILE_COUNT,
    TOKEN_OUTCOME,
    Board,
    InvalidPileIndex,
)

__all__ = [
    "AMBIGUOUS_OUTCOME",
    "DEFAULT_FRUIT_COUNT",
    "DEFAULT_TOKENS",
    "DIE_FACES",
    "PILE_COUNT",
    "TOKEN_OUTCOME",
    "Board",
    "InvalidPileIndex",
]
