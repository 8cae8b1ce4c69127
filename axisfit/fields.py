from __future__ import annotations

from dataclasses import dataclass
import datetime as dt
from typing import Any, ClassVar, Literal, Protocol, Sequence

from axisfit.scales import format_tick


TransformKind = Literal["linear", "log", "root"]
RANGE_MARKER = "…"


@dataclass(frozen=True)
class Scalar:
    value: Any
    kind: ClassVar[Literal["scalar"]] = "scalar"

    def __str__(self) -> str:
        return _plain_text(self.value)


@dataclass(frozen=True)
class Range:
    """A contiguous bin such as a histogram bucket, drawn as ``low…high``."""

    low: Any
    high: Any
    kind: ClassVar[Literal["range"]] = "range"

    def __str__(self) -> str:
        return f"{_plain_text(self.low)}{RANGE_MARKER}{_plain_text(self.high)}"


TickValue = Scalar | Range


class FieldStats(Protocol):
    @property
    def name(self) -> str:
        ...

    @property
    def label(self) -> str:
        ...

    @property
    def synthetic(self) -> bool:
        ...

    @property
    def is_date(self) -> bool:
        ...

    @property
    def min(self) -> float | None:
        ...

    @property
    def max(self) -> float | None:
        ...

    @property
    def categories(self) -> Sequence[TickValue]:
        ...

    def format(self, value: Any) -> str:
        ...

    def transform(self) -> TransformKind | None:
        ...

    def original_label(self) -> str | None:
        ...


@dataclass(frozen=True)
class Field:
    """Immutable in-memory field statistics.

    Dates are held as POSIX seconds in ``min``/``max`` and formatted as ISO
    dates.
    """

    name: str
    label: str = ""
    categories: tuple[TickValue, ...] = ()
    min: float | None = None
    max: float | None = None
    is_date: bool = False
    synthetic: bool = False
    transform_kind: TransformKind | None = None
    original_label_text: str | None = None

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.name)
        object.__setattr__(self, "categories", tuple(_as_tick_value(v) for v in self.categories))

    def format(self, value: Any) -> str:
        if isinstance(value, Range):
            return f"{self.format(value.low)}{RANGE_MARKER}{self.format(value.high)}"
        if isinstance(value, Scalar):
            value = value.value
        if self.is_date and isinstance(value, (int, float)) and not isinstance(value, bool):
            return dt.datetime.fromtimestamp(float(value), tz=dt.timezone.utc).date().isoformat()
        return _plain_text(value)

    def transform(self) -> TransformKind | None:
        return self.transform_kind

    def original_label(self) -> str | None:
        return self.original_label_text


def _as_tick_value(value: Any) -> TickValue:
    if isinstance(value, (Scalar, Range)):
        return value
    return Scalar(value)


def _plain_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return format_tick(value)
    return str(value)
