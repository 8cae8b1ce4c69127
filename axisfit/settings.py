from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
import os
from pathlib import Path
import tomllib
from typing import Any

from axisfit.errors import AxisConfigError


LOGGER = logging.getLogger(__name__)
SETTINGS_ENV_VAR = "AXISFIT_SETTINGS"


@dataclass(frozen=True)
class AxisLayoutSettings:
    """Empirical tuning values used by the layout heuristics.

    Defaults reproduce the reference layouts; change them only to recalibrate
    for a different font or renderer.
    """

    char_width_px: float = 6.5
    tick_margin_px: int = 5
    skip_spacing_px: float = 20.0
    vertical_tick_spacing_px: int = 16
    millions_threshold: float = 2e6
    numeric_tick_count: int = 10
    numeric_sample_divisions: int = 5
    min_numeric_chars: int = 3
    title_height_px: int = 16
    horizontal_base_size_px: int = 20
    rotated_tick_mark_px: int = 16
    rotated_right_gutter_px: int = 10
    rotated_left_offset_px: int = 8
    vertical_gutter_px: int = 5
    vertical_tick_mark_px: int = 10
    max_tick_count: int = 100
    title_separator: str = ", "


DEFAULT_SETTINGS = AxisLayoutSettings()


def load_settings(path: str | Path, *, base: AxisLayoutSettings = DEFAULT_SETTINGS) -> AxisLayoutSettings:
    try:
        with Path(path).open("rb") as f:
            raw = tomllib.load(f)
    except OSError as exc:
        raise AxisConfigError(f"cannot read settings file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise AxisConfigError(f"invalid settings file {path}: {exc}") from exc
    table = raw.get("axisfit", raw)
    if not isinstance(table, dict):
        raise AxisConfigError("axisfit settings must be a table")
    return settings_from_mapping(table, base=base)


def settings_from_mapping(values: dict[str, Any], *, base: AxisLayoutSettings = DEFAULT_SETTINGS) -> AxisLayoutSettings:
    known = {f.name: f for f in fields(AxisLayoutSettings)}
    updates: dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            raise AxisConfigError(f"unknown setting: {key}")
        current = getattr(base, key)
        updates[key] = _coerce_setting(key, value, current)
    return replace(base, **updates)


def settings_from_env(environ: dict[str, str] | None = None) -> AxisLayoutSettings:
    env = os.environ if environ is None else environ
    raw = env.get(SETTINGS_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_SETTINGS
    LOGGER.debug("loading axis layout settings from %s", raw)
    return load_settings(raw)


def _coerce_setting(key: str, value: Any, current: Any) -> Any:
    if isinstance(current, str):
        if not isinstance(value, str):
            raise AxisConfigError(f"{key} must be a string")
        return value
    # bool is an int subclass but never a valid tuning value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AxisConfigError(f"{key} must be a number")
    if value <= 0:
        raise AxisConfigError(f"{key} must be > 0")
    if isinstance(current, int):
        if isinstance(value, float) and not value.is_integer():
            raise AxisConfigError(f"{key} must be an integer")
        return int(value)
    return float(value)
