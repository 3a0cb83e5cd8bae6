import pytest

from karasu.utils.stats import wilson_ci


def test_wilson_brackets_the_proportion():
    low, high = wilson_ci(30, 100)
    assert low < 0.3 < high
    assert 0.0 <= low <= high <= 1.0


def test_wilson_narrows_with_more_games():
    small = wilson_ci(5, 10)
    large = wilson_ci(5_000, 10_000)
    assert (large[1] - large[0]) < (small[1] - small[0])


def test_wilson_extremes_are_clipped():
    assert wilson_ci(0, 50)[0] == 0.0
    assert wilson_ci(50, 50)[1] == 1.0


def test_wilson_empty_batch_is_uninformative():
    assert wilson_ci(0, 0) == (0.0, 1.0)


@pytest.mark.parametrize("k,n,alpha", [(1, -1, 0.05), (5, 3, 0.05), (-1, 3, 0.05), (1, 3, 0.0), (1, 3, 1.0)])
def test_wilson_rejects_bad_input(k, n, alpha):
    with pytest.raises(ValueError):
        wilson_ci(k, n, alpha)


@pytest.mark.parametrize("n", [1, 7, 50, 2_000, 100_000])
def test_wilson_contains_all_or_nothing_proportions(n):
    assert wilson_ci(0, n)[0] == 0.0
    assert wilson_ci(n, n)[1] == 1.0
