"""Utility subpackage for Karasu.

This package collects small helpers shared by the game, simulation and CLI
layers.  Functions are organised into focused modules such as
:mod:`parallel`, :mod:`random` and :mod:`logging` so that the core game logic
remains free of side effects like multiprocessing or handler setup.

The most commonly used helpers are re-exported here for convenience.
"""

from __future__ import annotations

from .logging import configure_logging, resolve_level
from .random import (
    MAX_UINT32,
    NumpyRandomSource,
    RandomSource,
    make_random_source,
    make_rng,
    spawn_seeds,
)
from .stats import wilson_ci

__all__ = [
    "configure_logging",
    "resolve_level",
    "MAX_UINT32",
    "NumpyRandomSource",
    "RandomSource",
    "make_random_source",
    "make_rng",
    "spawn_seeds",
    "wilson_ci",
]
