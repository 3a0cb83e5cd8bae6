# src/karasu/utils/stats.py
"""Statistical helpers for summarising win fractions."""

from __future__ import annotations

from math import sqrt

from scipy.stats import norm


def wilson_ci(k: int, n: int, alpha: float = 0.05) -> tuple[float, float]:
    """Return the Wilson score confidence interval for a binomial proportion.

    Parameters
    ----------
    k :
        Number of player wins. Must satisfy ``0 <= k <= n``.
    n :
        Number of games played. ``0`` yields the uninformative ``(0.0, 1.0)``.
    alpha :
        Two-sided significance level. ``alpha=0.05`` yields a 95 % interval.

    Returns
    -------
    tuple[float, float]
        ``(lower, upper)`` bounds clipped to ``[0, 1]`` with ``lower <= upper``.

    Raises
    ------
    ValueError
        If ``n < 0``, ``k`` lies outside ``[0, n]``, or ``alpha`` is not in ``(0, 1)``.
    """

    if n < 0:
        raise ValueError("n must be non-negative")
    if not 0 <= k <= n:
        raise ValueError("k must be between 0 and n (inclusive)")
    if not 0.0 < alpha < 1.0:
        raise ValueError("alpha must be in (0, 1)")
    if n == 0:
        return 0.0, 1.0

    proportion = k / n
    z = norm.ppf(1.0 - alpha / 2.0)
    z2 = z * z
    denom = 1.0 + z2 / n
    center = proportion + z2 / (2.0 * n)
    margin = z * sqrt((proportion * (1.0 - proportion) + z2 / (4.0 * n)) / n)
    lower = float(max(0.0, min(1.0, (center - margin) / denom)))
    upper = float(max(0.0, min(1.0, (center + margin) / denom)))
    if k == 0:
        lower = 0.0
    if k == n:
        upper = 1.0
    if lower > upper:  # numeric noise
        lower = upper
    return lower, upper


__all__ = ["wilson_ci"]
