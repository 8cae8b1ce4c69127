from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from axisfit.fields import FieldStats, TickValue
from axisfit.scales import sample_divisions
from axisfit.settings import DEFAULT_SETTINGS, AxisLayoutSettings


LOGGER = logging.getLogger(__name__)


def is_in_millions(
    fields: Sequence[FieldStats],
    categorical: bool,
    settings: AxisLayoutSettings = DEFAULT_SETTINGS,
) -> bool:
    if categorical:
        return False
    for f in fields:
        if f.is_date or f.min is None or f.max is None:
            continue
        if f.max - f.min > settings.millions_threshold:
            return True
    return False


def is_log(fields: Sequence[FieldStats]) -> bool:
    return len(fields) > 0 and fields[0].transform() == "log"


def count_ticks(
    fields: Sequence[FieldStats],
    categorical: bool,
    settings: AxisLayoutSettings = DEFAULT_SETTINGS,
) -> int:
    if not categorical:
        return settings.numeric_tick_count
    # Keeps space-per-tick arithmetic away from zero.
    return max(1, sum(len(f.categories) for f in fields))


def max_category_width(
    fields: Sequence[FieldStats],
    categorical: bool,
    settings: AxisLayoutSettings = DEFAULT_SETTINGS,
) -> int:
    """Pixel width of the widest label the axis will need to draw."""
    if not fields:
        return 0
    max_chars = 1
    for f in fields:
        if categorical:
            for value in f.categories:
                max_chars = max(max_chars, _label_chars(f.format(value), value))
        else:
            for tick in sample_divisions(f, settings.numeric_sample_divisions).tolist():
                max_chars = max(max_chars, len(f.format(tick)))
            # Renderers often show fractional ticks on integer scales.
            max_chars = max(max_chars, settings.min_numeric_chars)
    return int(max_chars * settings.char_width_px)


def max_tick_width(ticks: Iterable[TickValue], settings: AxisLayoutSettings = DEFAULT_SETTINGS) -> int:
    max_chars = 1
    for value in ticks:
        max_chars = max(max_chars, _label_chars(str(value), value))
    return int(max_chars * settings.char_width_px)


def skipping_tick_values(
    fields: Sequence[FieldStats],
    categorical: bool,
    space: float,
    count: int,
    settings: AxisLayoutSettings = DEFAULT_SETTINGS,
) -> tuple[TickValue, ...] | None:
    """Every n-th category so that labels sit roughly ``skip_spacing_px`` apart.

    Returns ``None`` when every category fits.
    """
    if not categorical:
        return None
    space_per_tick = space / count
    if space_per_tick == 0:
        skip = max(2, count)
    else:
        skip = _round_half_up(settings.skip_spacing_px / space_per_tick)
    if skip < 2:
        return None
    LOGGER.debug("skipping categorical ticks: keeping 1 in %d of %d", skip, count)
    kept: list[TickValue] = []
    at = 0
    for f in fields:
        for value in f.categories:
            if at % skip == 0:
                kept.append(value)
            at += 1
    return tuple(kept)


def _label_chars(text: str, value: TickValue) -> int:
    # The range marker renders noticeably wider than other characters.
    return len(text) + 1 if value.kind == "range" else len(text)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
