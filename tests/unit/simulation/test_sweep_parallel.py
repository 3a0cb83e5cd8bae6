import pytest

from karasu.simulation.sweep import run_sweep


@pytest.mark.parametrize("n_jobs", [2])
def test_parallel_sweep_matches_serial(n_jobs):
    kwargs = dict(
        strategy_names=["random", "min"],
        token_range=(1, 3),
        fruit_range=(1, 3),
        trial_count=40,
        seed=123,
    )
    serial = list(run_sweep(n_jobs=1, **kwargs))
    parallel = list(run_sweep(n_jobs=n_jobs, **kwargs))
    assert parallel == serial
    assert [(r.strategy, r.tokens, r.fruit) for r in parallel][:3] == [
        ("random", 1, 1),
        ("random", 1, 2),
        ("random", 1, 3),
    ]
