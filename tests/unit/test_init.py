import pytest

import karasu


def test_version_is_exposed():
    assert isinstance(karasu.__version__, str)
    assert karasu.__version__


def test_lazy_exports_resolve():
    from karasu.game.board import Board
    from karasu.simulation.sweep import run_sweep

    assert karasu.Board is Board
    assert karasu.run_sweep is run_sweep


def test_unknown_attribute():
    with pytest.raises(AttributeError):
        karasu.does_not_exist  # noqa: B018
