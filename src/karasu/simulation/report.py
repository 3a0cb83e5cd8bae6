# src/karasu/simulation/report.py
"""Plain-text sweep report.

One header line followed by one whitespace-separated line per record::

    karasuPieces fruitPieces strategy playerWins/count %playerWins
    1 1 random 54012/100000 0.54012
"""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

import numpy as np

from karasu.simulation.sweep import OutcomeRecord

__all__ = ["REPORT_HEADER", "format_fraction", "format_record", "write_report"]

REPORT_HEADER = "karasuPieces fruitPieces strategy playerWins/count %playerWins"


def format_fraction(value: float) -> str:
    """Render ``value`` as the shortest single-precision float text (``0.5``, ``1.0``)."""
    return str(np.float32(value))


def format_record(record: OutcomeRecord) -> str:
    return (
        f"{record.tokens} {record.fruit} {record.strategy} "
        f"{record.wins}/{record.total} {format_fraction(record.win_fraction)}"
    )


def write_report(records: Iterable[OutcomeRecord], stream: TextIO | None = None) -> int:
    """Write the header and one line per record; return the number of records.

    Each line is flushed as soon as it is written so a long sweep can be
    followed live.
    """
    out = sys.stdout if stream is None else stream
    print(REPORT_HEADER, file=out, flush=True)
    n = 0
    for record in records:
        print(format_record(record), file=out, flush=True)
        n += 1
    return n
