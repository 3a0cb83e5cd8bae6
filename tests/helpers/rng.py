"""Deterministic random sources for tests."""

from __future__ import annotations

from typing import Iterable


class ScriptedSource:
    """Replays a fixed list of values, then raises so runaway loops fail loudly."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        self.calls: list[int] = []  # the bound passed to each call

    def next_int_below(self, n: int) -> int:
        if len(self.calls) >= len(self.values):
            raise AssertionError(f"ScriptedSource exhausted after {len(self.values)} draws")
        value = self.values[len(self.calls)]
        self.calls.append(n)
        assert 0 <= value < n, f"scripted value {value} outside [0, {n})"
        return value


class ConstantSource:
    """Always returns the same value."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.n_calls = 0

    def next_int_below(self, n: int) -> int:
        self.n_calls += 1
        assert 0 <= self.value < n
        return self.value
