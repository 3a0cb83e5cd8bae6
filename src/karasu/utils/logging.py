# src/karasu/utils/logging.py
"""Root logger setup shared by the ``karasu`` commands.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed once, by the CLI, through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s [%(process)d] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | int) -> int:
    """Map a level name (any case) or number to a ``logging`` constant.

    Raises
    ------
    ValueError
        If ``level`` is a name outside :data:`LOG_LEVELS`.
    """
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of: {', '.join(LOG_LEVELS)}")
    return getattr(logging, name)


def configure_logging(*, level: str | int = logging.INFO, log_file: str | Path | None = None) -> None:
    """Send log records to stderr, and also to ``log_file`` when one is given.

    Handlers installed by an earlier call are replaced. The parent directory
    of ``log_file`` is created if missing.
    """
    numeric = resolve_level(level)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    logging.basicConfig(
        level=numeric,
        handlers=handlers,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,
    )


__all__ = ["DATE_FORMAT", "LOG_FORMAT", "LOG_LEVELS", "configure_logging", "resolve_level"]
