# src/karasu/utils/parallel.py
"""Parallel execution helpers used by sweeps.

Small, testable utilities for mapping work with a ProcessPoolExecutor while
keeping results in submission order.  Keep simulation-specific logic outside
utils.
"""

from __future__ import annotations

from collections import deque
from concurrent.futures import Future, ProcessPoolExecutor
from typing import Callable, Iterable, Iterator, TypeVar

_T = TypeVar("_T")
_R = TypeVar("_R")


def process_map(
    fn: Callable[[_T], _R],
    items: Iterable[_T],
    *,
    n_jobs: int | None = None,
    window: int = 0,
) -> Iterator[_R]:
    """Map ``fn`` across ``items``, yielding results in input order.

    ``n_jobs`` of ``None``, ``0`` or ``1`` runs in-process.  Otherwise at most
    ``window`` tasks (default ``n_jobs * 4``) are in flight at once so long
    sweeps do not queue every task up front.
    """
    if n_jobs in (None, 0, 1):
        for it in items:
            yield fn(it)
        return
    if window <= 0:
        window = n_jobs * 4

    with ProcessPoolExecutor(max_workers=n_jobs) as pool:
        it = iter(items)
        futs: deque[Future[_R]] = deque()
        for item in it:
            futs.append(pool.submit(fn, item))
            if len(futs) >= window:
                break
        while futs:
            head = futs.popleft()
            result = head.result()
            nxt = next(it, _SENTINEL)
            if nxt is not _SENTINEL:
                futs.append(pool.submit(fn, nxt))
            yield result


_SENTINEL = object()

__all__ = ["process_map"]
