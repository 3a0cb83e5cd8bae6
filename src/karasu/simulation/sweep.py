# src/karasu/simulation/sweep.py
"""Parameter sweeps over starting counts and strategies.

For every strategy, every starting token count and every starting fruit count
(in that nesting order) a batch of games is played and summarised as an
:class:`OutcomeRecord`.  Each combination owns an independent random stream
derived from one master seed, so a seeded sweep yields identical records
whether it runs serially or across worker processes.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Sequence

import pandas as pd

from karasu.simulation.simulation import run_trials
from karasu.simulation.strategies import DEFAULT_STRATEGY_NAMES, get_strategy
from karasu.utils.parallel import process_map
from karasu.utils.random import RandomSource, make_random_source, spawn_seeds
from karasu.utils.stats import wilson_ci
from karasu.utils.types import IntRange

if TYPE_CHECKING:
    from karasu.config import AppConfig

__all__: list[str] = [
    "DEFAULT_TRIAL_COUNT",
    "DEFAULT_TOKEN_RANGE",
    "DEFAULT_FRUIT_RANGE",
    "OutcomeRecord",
    "SweepTask",
    "iter_parameter_grid",
    "build_tasks",
    "run_task",
    "run_sweep",
    "run_sweep_from_config",
    "outcomes_frame",
]

LOGGER = logging.getLogger(__name__)

DEFAULT_TRIAL_COUNT: int = 100_000
DEFAULT_TOKEN_RANGE: IntRange = (1, 20)
DEFAULT_FRUIT_RANGE: IntRange = (1, 20)

RngFactory = Callable[[int | None], RandomSource]


@dataclass(frozen=True, slots=True)
class OutcomeRecord:
    """Aggregated result of one ``(strategy, tokens, fruit)`` batch."""

    tokens: int
    fruit: int
    strategy: str
    wins: int
    total: int

    @property
    def win_fraction(self) -> float:
        """``wins / total``; ``0.0`` for an empty batch."""
        return self.wins / self.total if self.total else 0.0

    def wilson_interval(self, alpha: float = 0.05) -> tuple[float, float]:
        return wilson_ci(self.wins, self.total, alpha)


@dataclass(frozen=True, slots=True)
class SweepTask:
    """One unit of sweep work; picklable so it can cross process boundaries."""

    tokens: int
    fruit: int
    strategy: str
    trial_count: int
    seed: int | None = None
    strict: bool = False


# ---------------------------------------------------------------------------
# Grid helpers
# ---------------------------------------------------------------------------


def _check_range(label: str, bounds: IntRange) -> range:
    low, high = bounds
    if low < 0:
        raise ValueError(f"{label} must start at 0 or above, got {bounds}")
    if high < low:
        raise ValueError(f"{label} is empty: {bounds}")
    return range(low, high + 1)


def iter_parameter_grid(
    strategy_names: Sequence[str],
    token_range: IntRange = DEFAULT_TOKEN_RANGE,
    fruit_range: IntRange = DEFAULT_FRUIT_RANGE,
) -> Iterator[tuple[str, int, int]]:
    """Yield ``(strategy, tokens, fruit)`` in report order.

    Strategies vary slowest (declaration order), then tokens ascending, then
    fruit ascending.  Both ranges are inclusive.
    """
    tokens_values = _check_range("token_range", token_range)
    fruit_values = _check_range("fruit_range", fruit_range)
    for name in strategy_names:
        for tokens in tokens_values:
            for fruit in fruit_values:
                yield name, tokens, fruit


def build_tasks(
    *,
    strategy_names: Sequence[str] = DEFAULT_STRATEGY_NAMES,
    token_range: IntRange = DEFAULT_TOKEN_RANGE,
    fruit_range: IntRange = DEFAULT_FRUIT_RANGE,
    trial_count: int = DEFAULT_TRIAL_COUNT,
    seed: int | None = None,
    strict: bool = False,
) -> list[SweepTask]:
    """Materialise the sweep grid with one derived seed per combination."""
    if trial_count < 0:
        raise ValueError(f"trial_count must be non-negative, got {trial_count}")
    if not strategy_names:
        raise ValueError("at least one strategy name is required")
    for name in strategy_names:
        get_strategy(name)  # fail fast on typos

    combos = list(iter_parameter_grid(strategy_names, token_range, fruit_range))
    if seed is None:
        seeds: list[int | None] = [None] * len(combos)
    else:
        seeds = [int(s) for s in spawn_seeds(len(combos), seed=seed)]
    return [
        SweepTask(
            tokens=tokens,
            fruit=fruit,
            strategy=name,
            trial_count=trial_count,
            seed=task_seed,
            strict=strict,
        )
        for (name, tokens, fruit), task_seed in zip(combos, seeds, strict=True)
    ]


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


def run_task(task: SweepTask, rng_factory: RngFactory = make_random_source) -> OutcomeRecord:
    """Play every game of ``task`` on its own random stream."""
    wins, total = run_trials(
        task.trial_count,
        task.fruit,
        task.tokens,
        get_strategy(task.strategy),
        rng=rng_factory(task.seed),
        strict=task.strict,
    )
    return OutcomeRecord(
        tokens=task.tokens,
        fruit=task.fruit,
        strategy=task.strategy,
        wins=wins,
        total=total,
    )


def _run_task_default(task: SweepTask) -> OutcomeRecord:
    return run_task(task)


def run_sweep(
    *,
    strategy_names: Sequence[str] = DEFAULT_STRATEGY_NAMES,
    token_range: IntRange = DEFAULT_TOKEN_RANGE,
    fruit_range: IntRange = DEFAULT_FRUIT_RANGE,
    trial_count: int = DEFAULT_TRIAL_COUNT,
    seed: int | None = None,
    n_jobs: int = 1,
    strict: bool = False,
    rng_factory: RngFactory | None = None,
) -> Iterator[OutcomeRecord]:
    """Return an iterator of :class:`OutcomeRecord`, one per combination, in report order.

    Arguments are validated before anything runs; games are played lazily as
    the iterator is consumed.

    Parameters
    ----------
    strategy_names
        Registered strategy names, outermost loop.
    token_range, fruit_range
        Inclusive ``(low, high)`` bounds for the starting counts.
    trial_count
        Games per combination.
    seed
        Master seed; ``None`` gives every combination fresh entropy.
    n_jobs
        Worker processes; ``1`` runs in-process.
    strict
        Use strict boards that reject out-of-range pile indices.
    rng_factory
        Builds a random source from a combination seed.  Custom factories
        run in-process only, since they may not survive pickling.
    """
    tasks = build_tasks(
        strategy_names=strategy_names,
        token_range=token_range,
        fruit_range=fruit_range,
        trial_count=trial_count,
        seed=seed,
        strict=strict,
    )
    if n_jobs < 0:
        raise ValueError(f"n_jobs must be non-negative, got {n_jobs}")
    if rng_factory is not None and n_jobs not in (0, 1):
        raise ValueError("a custom rng_factory requires n_jobs=1")

    LOGGER.info(
        "Sweep start",
        extra={
            "stage": "sweep",
            "strategies": list(strategy_names),
            "token_range": tuple(token_range),
            "fruit_range": tuple(fruit_range),
            "trial_count": trial_count,
            "combinations": len(tasks),
            "seed": seed,
            "n_jobs": n_jobs,
        },
    )

    if rng_factory is None:
        results: Iterable[OutcomeRecord] = process_map(_run_task_default, tasks, n_jobs=n_jobs)
    else:
        factory = rng_factory
        results = (run_task(task, factory) for task in tasks)
    return _stream(results)


def _stream(results: Iterable[OutcomeRecord]) -> Iterator[OutcomeRecord]:
    emitted = 0
    for record in results:
        LOGGER.debug(
            "Combination done: tokens=%d fruit=%d strategy=%s wins=%d/%d",
            record.tokens,
            record.fruit,
            record.strategy,
            record.wins,
            record.total,
            extra={"stage": "sweep"},
        )
        emitted += 1
        yield record

    LOGGER.info("Sweep complete", extra={"stage": "sweep", "combinations": emitted})


def run_sweep_from_config(cfg: AppConfig) -> Iterator[OutcomeRecord]:
    """Run :func:`run_sweep` with the settings in ``cfg.sim``."""
    sim = cfg.sim
    return run_sweep(
        strategy_names=list(sim.strategies),
        token_range=tuple(sim.token_range),  # type: ignore[arg-type]
        fruit_range=tuple(sim.fruit_range),  # type: ignore[arg-type]
        trial_count=sim.trial_count,
        seed=sim.seed,
        n_jobs=sim.n_jobs,
        strict=sim.strict_piles,
    )


# ---------------------------------------------------------------------------
# Aggregation helper
# ---------------------------------------------------------------------------


def outcomes_frame(records: Iterable[OutcomeRecord], *, alpha: float = 0.05) -> pd.DataFrame:
    """Collect records into a tidy ``DataFrame`` with Wilson intervals.

    Columns: ``karasu_pieces, fruit_pieces, strategy, player_wins, count,
    win_fraction, ci_low, ci_high``.
    """
    rows = []
    for record in records:
        low, high = record.wilson_interval(alpha)
        row = asdict(record)
        rows.append(
            {
                "karasu_pieces": row["tokens"],
                "fruit_pieces": row["fruit"],
                "strategy": row["strategy"],
                "player_wins": row["wins"],
                "count": row["total"],
                "win_fraction": record.win_fraction,
                "ci_low": low,
                "ci_high": high,
            }
        )
    columns = [
        "karasu_pieces",
        "fruit_pieces",
        "strategy",
        "player_wins",
        "count",
        "win_fraction",
        "ci_low",
        "ci_high",
    ]
    return pd.DataFrame(rows, columns=columns)
