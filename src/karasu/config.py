# src/karasu/config.py
"""Configuration schemas and helpers for Karasu experiment sweeps.

Defines dataclasses describing simulation and logging settings and includes
utilities for loading YAML overlays and applying ``section.option=value``
overrides.  Only the CLI reads files; the simulation core receives plain
values.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, get_args, get_origin, get_type_hints

import yaml  # type: ignore[import-untyped]

from karasu.simulation.strategies import DEFAULT_STRATEGY_NAMES
from karasu.utils.yaml_helpers import expand_dotted_keys

# ─────────────────────────────────────────────────────────────────────────────
# Dataclasses (schema)
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class SimConfig:
    """Sweep parameters."""

    trial_count: int = 100_000
    token_range: tuple[int, int] = (1, 20)
    fruit_range: tuple[int, int] = (1, 20)
    strategies: list[str] = field(default_factory=lambda: list(DEFAULT_STRATEGY_NAMES))
    seed: int | None = None
    n_jobs: int = 1
    strict_piles: bool = False


@dataclass
class LoggingConfig:
    """Root logger settings applied by the CLI."""

    level: str = "INFO"
    log_file: Path | None = None


@dataclass
class AppConfig:
    """Top-level configuration container."""

    sim: SimConfig = field(default_factory=SimConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ─────────────────────────────────────────────────────────────────────────────
# Loader (one or more YAML overlays; dotted keys allowed)
# ─────────────────────────────────────────────────────────────────────────────


def _deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``overlay`` onto ``base`` and return a new mapping."""
    result: dict[str, Any] = dict(base)
    for key, val in overlay.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(val, Mapping):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _annotation_contains(annotation: Any, target: type) -> bool:
    """Recursively inspect type annotations for the presence of ``target``."""
    if annotation is None:
        return False
    if annotation is target:
        return True
    origin = get_origin(annotation)
    if origin is None:
        return False
    return origin is target or any(_annotation_contains(arg, target) for arg in get_args(annotation))


def _build(cls: type, section: Mapping[str, Any]) -> Any:
    """Instantiate dataclass ``cls`` from a mapping, coercing paths and ranges."""
    if not isinstance(section, Mapping):
        raise TypeError(f"Section for {cls.__name__} must be a mapping, got {type(section).__name__}")
    obj = cls()
    type_hints = get_type_hints(cls)
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = set(section) - known
    if unknown:
        raise AttributeError(f"Unknown option(s) {sorted(unknown)} for {cls.__name__}")
    for name, val in section.items():
        annotation = type_hints.get(name)
        if _annotation_contains(annotation, Path) and isinstance(val, str):
            val = Path(val)
        elif _annotation_contains(annotation, tuple) and isinstance(val, list):
            val = tuple(val)
        setattr(obj, name, val)
    return obj


def load_app_config(*overlays: Path) -> AppConfig:
    """Deterministically merge one or more YAML overlays into an :class:`AppConfig`.

    Files are read in the order provided, dotted keys are expanded, and later
    overlays always win.
    """
    data: dict[str, Any] = {}
    for path in overlays:
        with path.open("r", encoding="utf-8") as fh:
            overlay = yaml.safe_load(fh) or {}
        if not isinstance(overlay, Mapping):
            raise TypeError(f"Config file {path} must contain a mapping")
        data = _deep_merge(data, expand_dotted_keys(overlay))

    unknown = set(data) - {f.name for f in dataclasses.fields(AppConfig)}
    if unknown:
        raise AttributeError(f"Unknown config section(s): {sorted(unknown)}")

    return AppConfig(
        sim=_build(SimConfig, data.get("sim", {})),
        logging=_build(LoggingConfig, data.get("logging", {})),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Command-line overrides
# ─────────────────────────────────────────────────────────────────────────────


def _parse_bool(value: str) -> bool:
    val_lower = value.lower()
    if val_lower in {"1", "true", "yes", "on"}:
        return True
    if val_lower in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Cannot parse boolean value from {value!r}")


def _coerce(value: str, current: Any, annotation: Any | None = None) -> Any:
    """Coerce the override string ``value`` to the type of ``current``."""
    if isinstance(current, bool) or _annotation_contains(annotation, bool):
        return _parse_bool(value)
    if value.lower() in {"none", "null"} and _annotation_contains(annotation, type(None)):
        return None
    if isinstance(current, tuple) or _annotation_contains(annotation, tuple):
        # "1-20" or "1,20"
        parts = value.replace("-", ",").split(",")
        if len(parts) != 2:
            raise ValueError(f"Cannot parse range from {value!r}; use LOW-HIGH")
        return int(parts[0]), int(parts[1])
    if isinstance(current, list) or _annotation_contains(annotation, list):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(current, int) or _annotation_contains(annotation, int):
        return int(value)
    if isinstance(current, Path) or _annotation_contains(annotation, Path):
        return Path(value)
    return value


def apply_dot_overrides(cfg: AppConfig, pairs: list[str]) -> AppConfig:
    """Apply ``section.option=value`` overrides to *cfg* in place and return it."""
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Invalid override {pair!r}")
        key, raw = pair.split("=", 1)
        if "." not in key:
            raise ValueError(f"Invalid override {pair!r}")
        section_name, option = key.split(".", 1)
        section = getattr(cfg, section_name, None)
        if section is None or not dataclasses.is_dataclass(section):
            raise AttributeError(f"Unknown config section {section_name!r}")
        if not hasattr(section, option):
            raise AttributeError(f"Unknown option {option!r} in section {section_name!r}")
        current = getattr(section, option)
        annotation = get_type_hints(type(section)).get(option)
        setattr(section, option, _coerce(raw, current, annotation))
    return cfg


__all__ = [
    "SimConfig",
    "LoggingConfig",
    "AppConfig",
    "load_app_config",
    "apply_dot_overrides",
]
