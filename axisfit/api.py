from __future__ import annotations

from typing import Sequence

from axisfit.descriptor import AxisDescriptor
from axisfit.fields import FieldStats
from axisfit.settings import AxisLayoutSettings, settings_from_env


def axis(
    dimension: str,
    fields: Sequence[FieldStats],
    *,
    categorical: bool,
    title: str | None = None,
    tick_count: int | None = None,
    settings: AxisLayoutSettings | None = None,
) -> AxisDescriptor:
    if not dimension:
        raise ValueError("dimension must be non-empty")
    return AxisDescriptor.create(
        dimension,
        fields,
        categorical,
        user_title=title,
        tick_count=tick_count,
        settings=settings_from_env() if settings is None else settings,
    )
