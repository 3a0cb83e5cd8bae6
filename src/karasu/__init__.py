# src/karasu/__init__.py
"""Karasu - Monte-Carlo win-rate simulator for the Karasu fruit-pile dice game.

The friendly surface (``Board``, the runner functions and ``run_sweep``) is
exposed lazily so ``import karasu`` stays cheap until a name is used.
"""

from __future__ import annotations

import tomllib
from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _v
from pathlib import Path

# Path to the project's pyproject.toml for local version fallback
PYPROJECT_TOML = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

__all__ = [  # loads lazily, that's why reportUnsupportedDunderAll is triggered
    "Board",  # pyright: ignore[reportUnsupportedDunderAll]
    "InvalidPileIndex",  # pyright: ignore[reportUnsupportedDunderAll]
    "STRATEGIES",  # pyright: ignore[reportUnsupportedDunderAll]
    "play_one_game",  # pyright: ignore[reportUnsupportedDunderAll]
    "run_trials",  # pyright: ignore[reportUnsupportedDunderAll]
    "run_sweep",  # pyright: ignore[reportUnsupportedDunderAll]
    "OutcomeRecord",  # pyright: ignore[reportUnsupportedDunderAll]
]

_LAZY_IMPORTS = {
    "Board": "karasu.game.board",
    "InvalidPileIndex": "karasu.game.board",
    "STRATEGIES": "karasu.simulation.strategies",
    "play_one_game": "karasu.simulation.simulation",
    "run_trials": "karasu.simulation.simulation",
    "run_sweep": "karasu.simulation.sweep",
    "OutcomeRecord": "karasu.simulation.sweep",
}


def __getattr__(name: str):  # pragma: no cover - simple dynamic loader
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = import_module(module_name)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


def _read_version_from_toml() -> str:
    """Return the package version declared in ``pyproject.toml``.

    The file is expected to reside at the repository root three directories
    above this module.
    """
    with PYPROJECT_TOML.open("rb") as fh:
        data = tomllib.load(fh)
    return data["project"]["version"]


try:
    __version__ = _v("karasu")
except PackageNotFoundError:
    __version__ = _read_version_from_toml()
