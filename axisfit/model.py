from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Sequence

from axisfit import estimators
from axisfit.fields import FieldStats, TickValue
from axisfit.settings import DEFAULT_SETTINGS, AxisLayoutSettings
from axisfit.title import resolve_title


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisSpec:
    """Everything known about an axis before any space has been assigned to it."""

    scale_name: str
    fields: tuple[FieldStats, ...]
    categorical: bool
    title: str | None = None
    tick_count: int | None = None
    in_millions: bool = False
    settings: AxisLayoutSettings = DEFAULT_SETTINGS

    @classmethod
    def build(
        cls,
        dimension: str,
        fields: Sequence[FieldStats],
        categorical: bool,
        *,
        user_title: str | None = None,
        tick_count: int | None = None,
        settings: AxisLayoutSettings = DEFAULT_SETTINGS,
    ) -> "AxisSpec":
        defined = tuple(fields)
        if tick_count is not None and tick_count >= settings.max_tick_count:
            LOGGER.warning(
                "ignoring tick count %d for axis %s (must be < %d)",
                tick_count,
                dimension,
                settings.max_tick_count,
            )
            tick_count = None
        return cls(
            scale_name=f"scale_{dimension}",
            fields=defined,
            categorical=categorical,
            title=resolve_title(defined, user_title, separator=settings.title_separator),
            tick_count=tick_count,
            in_millions=estimators.is_in_millions(defined, categorical, settings),
            settings=settings,
        )

    def exists(self) -> bool:
        return len(self.fields) > 0

    @property
    def is_log(self) -> bool:
        return estimators.is_log(self.fields)

    def title_height(self) -> int:
        return 0 if self.title is None else self.settings.title_height_px

    def estimated_simple_size_when_horizontal(self) -> int:
        if not self.exists():
            return 0
        return self.settings.horizontal_base_size_px + self.title_height()

    def max_category_width(self) -> int:
        return estimators.max_category_width(self.fields, self.categorical, self.settings)

    def max_tick_width(self, ticks: Sequence[TickValue]) -> int:
        return estimators.max_tick_width(ticks, self.settings)

    def count_ticks(self) -> int:
        return estimators.count_ticks(self.fields, self.categorical, self.settings)

    def skipping_tick_values(self, space: float, count: int) -> tuple[TickValue, ...] | None:
        return estimators.skipping_tick_values(self.fields, self.categorical, space, count, self.settings)


@dataclass(frozen=True)
class AxisGeometry:
    rotated_ticks: bool = False
    tick_values: tuple[TickValue, ...] | None = None
    tick_count: int | None = None
    size: int = 0
    left_gutter: int = 0
    right_gutter: int = 0
    top_gutter: int = 0
    bottom_gutter: int = 0

    def as_dict(self) -> dict[str, Any]:
        return {
            "rotated_ticks": self.rotated_ticks,
            "tick_values": None if self.tick_values is None else [str(v) for v in self.tick_values],
            "tick_count": self.tick_count,
            "size": self.size,
            "left_gutter": self.left_gutter,
            "right_gutter": self.right_gutter,
            "top_gutter": self.top_gutter,
            "bottom_gutter": self.bottom_gutter,
        }
