# src/karasu/__main__.py
"""Command line entry point for the :mod:`karasu` package.

When executed as ``python -m karasu`` this module simply delegates to
:func:`karasu.cli.main.main` which implements the full CLI logic.
"""

from __future__ import annotations

from karasu.cli.main import main as cli_main


def main() -> None:
    """Invoke :func:`karasu.cli.main.main`."""

    raise SystemExit(cli_main())


if __name__ == "__main__":  # pragma: no cover - direct execution path
    main()
