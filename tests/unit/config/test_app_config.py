"""Tests for the ``karasu.config`` helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from karasu.config import AppConfig, SimConfig, apply_dot_overrides, load_app_config


@pytest.fixture
def write_yaml(tmp_path: Path):
    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data))
        return path

    return _write


def test_defaults_match_reference_sweep() -> None:
    sim = SimConfig()
    assert sim.trial_count == 100_000
    assert sim.token_range == (1, 20)
    assert sim.fruit_range == (1, 20)
    assert sim.strategies == ["random", "min", "max", "first", "zero"]
    assert sim.seed is None
    assert sim.n_jobs == 1
    assert sim.strict_piles is False


def test_strategies_default_is_not_shared() -> None:
    a, b = SimConfig(), SimConfig()
    a.strategies.append("extra")
    assert "extra" not in b.strategies


def test_load_app_config_merges_overlays(write_yaml) -> None:
    base = write_yaml(
        "base.yaml",
        {"sim": {"trial_count": 10, "seed": 1}, "logging": {"level": "DEBUG"}},
    )
    overlay = write_yaml(
        "overlay.yaml",
        {"sim.seed": 9, "sim": {"token_range": [2, 4]}, "logging.log_file": "logs/run.log"},
    )

    cfg = load_app_config(base, overlay)

    assert cfg.sim.trial_count == 10
    assert cfg.sim.seed == 9
    assert cfg.sim.token_range == (2, 4)
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.log_file == Path("logs/run.log")


def test_load_app_config_empty_file(write_yaml) -> None:
    path = write_yaml("empty.yaml", None)
    assert load_app_config(path) == AppConfig()


def test_load_app_config_rejects_non_mapping(write_yaml) -> None:
    path = write_yaml("list.yaml", [1, 2])
    with pytest.raises(TypeError):
        load_app_config(path)


def test_load_app_config_rejects_unknown_keys(write_yaml) -> None:
    with pytest.raises(AttributeError):
        load_app_config(write_yaml("a.yaml", {"sim": {"trials": 3}}))
    with pytest.raises(AttributeError):
        load_app_config(write_yaml("b.yaml", {"io": {"results_dir": "x"}}))


@pytest.mark.parametrize(
    "pair,attr,expected",
    [
        ("sim.trial_count=250", "trial_count", 250),
        ("sim.seed=7", "seed", 7),
        ("sim.seed=none", "seed", None),
        ("sim.n_jobs=4", "n_jobs", 4),
        ("sim.strict_piles=yes", "strict_piles", True),
        ("sim.token_range=3-5", "token_range", (3, 5)),
        ("sim.fruit_range=1,2", "fruit_range", (1, 2)),
        ("sim.strategies=min, zero", "strategies", ["min", "zero"]),
    ],
)
def test_apply_dot_overrides_coerces(pair, attr, expected) -> None:
    cfg = apply_dot_overrides(AppConfig(), [pair])
    assert getattr(cfg.sim, attr) == expected


def test_apply_dot_overrides_logging_section() -> None:
    cfg = apply_dot_overrides(AppConfig(), ["logging.level=WARNING", "logging.log_file=out.log"])
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.log_file == Path("out.log")


@pytest.mark.parametrize("pair", ["sim.trial_count", "trial_count=3", "sim.token_range=1-2-3"])
def test_apply_dot_overrides_malformed(pair) -> None:
    with pytest.raises(ValueError):
        apply_dot_overrides(AppConfig(), [pair])


@pytest.mark.parametrize("pair", ["sim.bogus=1", "nosuch.seed=1"])
def test_apply_dot_overrides_unknown(pair) -> None:
    with pytest.raises(AttributeError):
        apply_dot_overrides(AppConfig(), [pair])


def test_bad_boolean_override() -> None:
    with pytest.raises(ValueError, match="boolean"):
        apply_dot_overrides(AppConfig(), ["sim.strict_piles=maybe"])
