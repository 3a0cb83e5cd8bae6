# src/karasu/utils/random.py
"""Random number generator helpers.

The board only ever asks its random source for one thing: a uniform integer
below some bound.  :class:`RandomSource` captures that capability so tests can
swap in scripted sequences while real runs use a NumPy generator.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

# Max unsigned 32-bit integer for random seed generation.  Using this value
# keeps seeds compatible with languages like C/C++ that expect ``uint32``.
MAX_UINT32 = 2**32 - 1


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can produce uniform integers in ``[0, n)``."""

    def next_int_below(self, n: int) -> int: ...


class NumpyRandomSource:
    """:class:`RandomSource` backed by a :class:`numpy.random.Generator`."""

    __slots__ = ("generator",)

    def __init__(self, generator: np.random.Generator | None = None) -> None:
        self.generator = generator if generator is not None else np.random.default_rng()

    def next_int_below(self, n: int) -> int:
        return int(self.generator.integers(0, n))

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"NumpyRandomSource({self.generator!r})"


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return a :class:`numpy.random.Generator` seeded with *seed*."""

    return np.random.default_rng(seed)


def make_random_source(seed: int | None = None) -> NumpyRandomSource:
    """Return a :class:`NumpyRandomSource` seeded with *seed*."""

    return NumpyRandomSource(make_rng(seed))


def spawn_seeds(n: int, *, seed: int | None = None) -> np.ndarray:
    """Return ``n`` 32-bit seeds derived from ``seed``.

    The function relies on :func:`numpy.random.default_rng` to generate a
    reproducible sequence of unsigned 32-bit integers that can be used as
    independent seeds for each parameter combination of a sweep.
    """

    rng = make_rng(seed)
    return rng.integers(0, MAX_UINT32, size=n, dtype=np.uint32)


__all__ = [
    "MAX_UINT32",
    "NumpyRandomSource",
    "RandomSource",
    "make_random_source",
    "make_rng",
    "spawn_seeds",
]
