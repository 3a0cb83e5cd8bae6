# pragma: no cover
import logging

import pytest

from tests.helpers.rng import ConstantSource, ScriptedSource


@pytest.fixture
def capinfo(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.INFO)
    return caplog


@pytest.fixture
def scripted():
    """Factory: ``scripted([0, 5, ...])`` -> :class:`ScriptedSource`."""
    return ScriptedSource


@pytest.fixture
def constant():
    """Factory: ``constant(5)`` -> :class:`ConstantSource`."""
    return ConstantSource


@pytest.fixture
def preserve_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
