# src/karasu/utils/types.py
"""Shared type aliases for the Karasu project."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Tuple, TypeAlias

if TYPE_CHECKING:
    from karasu.game.board import Board

PilePair: TypeAlias = Tuple[int, int]  # two pile indices decremented on the ambiguous face
PileCounts: TypeAlias = Tuple[int, int, int, int]
SelectionStrategy: TypeAlias = Callable[["Board"], PilePair]
IntRange: TypeAlias = Tuple[int, int]  # inclusive (low, high)

__all__ = ["IntRange", "PileCounts", "PilePair", "SelectionStrategy"]
