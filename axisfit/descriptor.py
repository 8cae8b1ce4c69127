from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from axisfit.errors import AxisLayoutError
from axisfit.fields import FieldStats, TickValue
from axisfit.layout import layout_horizontally, layout_vertically
from axisfit.model import AxisGeometry, AxisSpec
from axisfit.settings import DEFAULT_SETTINGS, AxisLayoutSettings


@dataclass
class AxisDescriptor:
    """Display geometry for one chart axis.

    Built once from its fields, then laid out exactly once for the orientation
    it is drawn in. Before layout every geometry attribute reads as zero.
    """

    spec: AxisSpec
    _geometry: AxisGeometry | None = field(default=None, init=False, repr=False)

    @classmethod
    def create(
        cls,
        dimension: str,
        fields: Sequence[FieldStats],
        categorical: bool,
        *,
        user_title: str | None = None,
        tick_count: int | None = None,
        settings: AxisLayoutSettings = DEFAULT_SETTINGS,
    ) -> "AxisDescriptor":
        spec = AxisSpec.build(
            dimension,
            fields,
            categorical,
            user_title=user_title,
            tick_count=tick_count,
            settings=settings,
        )
        return cls(spec=spec)

    def layout_horizontally(self, available_space: float, fill_to_edge: bool = False) -> AxisGeometry:
        self._require_unlaid()
        self._geometry = layout_horizontally(self.spec, available_space, fill_to_edge)
        return self._geometry

    def layout_vertically(self, available_space: float) -> AxisGeometry:
        self._require_unlaid()
        self._geometry = layout_vertically(self.spec, available_space)
        return self._geometry

    def _require_unlaid(self) -> None:
        if self._geometry is not None:
            raise AxisLayoutError(f"axis {self.spec.scale_name} has already been laid out")

    def exists(self) -> bool:
        return self.spec.exists()

    @property
    def laid_out(self) -> bool:
        return self._geometry is not None

    @property
    def geometry(self) -> AxisGeometry:
        if self._geometry is None:
            return AxisGeometry(tick_count=self.spec.tick_count)
        return self._geometry

    @property
    def title(self) -> str | None:
        return self.spec.title

    @property
    def scale_name(self) -> str:
        return self.spec.scale_name

    @property
    def categorical(self) -> bool:
        return self.spec.categorical

    @property
    def fields(self) -> tuple[FieldStats, ...]:
        return self.spec.fields

    @property
    def in_millions(self) -> bool:
        return self.spec.in_millions

    @property
    def is_log(self) -> bool:
        return self.spec.is_log

    @property
    def rotated_ticks(self) -> bool:
        return self.geometry.rotated_ticks

    @property
    def tick_values(self) -> tuple[TickValue, ...] | None:
        return self.geometry.tick_values

    @property
    def tick_count(self) -> int | None:
        return self.geometry.tick_count

    @property
    def size(self) -> int:
        return self.geometry.size

    @property
    def left_gutter(self) -> int:
        return self.geometry.left_gutter

    @property
    def right_gutter(self) -> int:
        return self.geometry.right_gutter

    @property
    def top_gutter(self) -> int:
        return self.geometry.top_gutter

    @property
    def bottom_gutter(self) -> int:
        return self.geometry.bottom_gutter

    def max_category_width(self) -> int:
        return self.spec.max_category_width()

    def estimated_simple_size_when_horizontal(self) -> int:
        return self.spec.estimated_simple_size_when_horizontal()

    def as_dict(self) -> dict[str, object]:
        out: dict[str, object] = {
            "title": self.title,
            "scale": self.scale_name,
            "categorical": self.categorical,
            "in_millions": self.in_millions,
            "is_log": self.is_log,
        }
        out.update(self.geometry.as_dict())
        return out
