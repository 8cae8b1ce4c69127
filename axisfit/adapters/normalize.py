from __future__ import annotations

from collections.abc import Sequence
import datetime as dt
from decimal import Decimal
from typing import Any

import numpy as np

from axisfit.errors import AxisConfigError
from axisfit.fields import Field, Range, Scalar, TickValue, TransformKind


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


def field_from_values(
    name: str,
    values: Any,
    *,
    label: str | None = None,
    original_label: str | None = None,
    transform: TransformKind | None = None,
    synthetic: bool = False,
    is_date: bool | None = None,
) -> Field:
    """Summarise raw column values into a :class:`Field`.

    Categories keep first-seen order. Numeric and date columns also get a
    min/max, dates measured in POSIX seconds.
    """
    items = _coerce_1d(values, label=name)
    date_like = _looks_like_dates(items) if is_date is None else is_date

    # Bools are keyed apart so True and 1 stay distinct categories.
    categories: dict[tuple[bool, TickValue], TickValue] = {}
    numbers: list[float] = []
    for raw in items:
        if _is_missing(raw):
            continue
        if date_like:
            raw = _to_seconds(_as_date(raw, label=name))
            numbers.append(raw)
        elif _is_number(raw):
            numbers.append(float(raw))
        value = raw if isinstance(raw, (Scalar, Range)) else Scalar(_as_python(raw))
        key = (isinstance(value, Scalar) and isinstance(value.value, bool), value)
        categories.setdefault(key, value)

    vmin = vmax = None
    if numbers:
        arr = np.asarray(numbers, dtype=np.float64)
        arr = arr[np.isfinite(arr)]
        if arr.size:
            vmin = float(np.min(arr))
            vmax = float(np.max(arr))

    return Field(
        name=name,
        label=label or name,
        categories=tuple(categories.values()),
        min=vmin,
        max=vmax,
        is_date=date_like,
        synthetic=synthetic,
        transform_kind=transform,
        original_label_text=original_label,
    )


def fields_from_frame(data: Any, columns: Sequence[str]) -> list[Field]:
    if pd is None:
        raise AxisConfigError("pandas is required to read fields from a DataFrame")
    if not isinstance(data, pd.DataFrame):
        raise AxisConfigError("`data` must be a pandas DataFrame")
    out: list[Field] = []
    for column in columns:
        if column not in data.columns:
            raise AxisConfigError(f"column not found: {column}")
        series = data[column]
        out.append(
            field_from_values(
                str(column),
                series,
                is_date=bool(pd.api.types.is_datetime64_any_dtype(series)),
            )
        )
    return out


def _coerce_1d(value: Any, *, label: str) -> list[Any]:
    if pd is not None and isinstance(value, pd.Series):
        if pd.api.types.is_datetime64_any_dtype(value):
            return [None if pd.isna(v) else v.to_pydatetime() for v in value.tolist()]
        return value.tolist()

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise AxisConfigError(f"{label} must be 1-D")
        if value.dtype.kind == "M":
            return [None if np.isnat(v) else v.astype("datetime64[us]").item() for v in value]
        return value.tolist()

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return list(value)

    raise AxisConfigError(f"unsupported {label} input type: {type(value)!r}")


def _is_missing(raw: Any) -> bool:
    if raw is None:
        return True
    return isinstance(raw, float) and np.isnan(raw)


def _is_number(raw: Any) -> bool:
    if isinstance(raw, bool):
        return False
    return isinstance(raw, (int, float, Decimal, np.integer, np.floating))


def _as_python(raw: Any) -> Any:
    if isinstance(raw, (np.integer, np.floating)):
        return raw.item()
    if isinstance(raw, Decimal):
        return float(raw)
    return raw


def _looks_like_dates(items: list[Any]) -> bool:
    present = [v for v in items if not _is_missing(v)]
    return bool(present) and all(isinstance(v, (dt.date, dt.datetime)) for v in present)


def _as_date(raw: Any, *, label: str) -> dt.datetime:
    if isinstance(raw, dt.datetime):
        return raw if raw.tzinfo is not None else raw.replace(tzinfo=dt.timezone.utc)
    if isinstance(raw, dt.date):
        return dt.datetime(raw.year, raw.month, raw.day, tzinfo=dt.timezone.utc)
    if isinstance(raw, str):
        try:
            return _as_date(dt.datetime.fromisoformat(raw), label=label)
        except ValueError as exc:
            raise AxisConfigError(f"{label} contains a non-date value: {raw!r}") from exc
    raise AxisConfigError(f"{label} contains a non-date value: {raw!r}")


def _to_seconds(value: dt.datetime) -> float:
    return value.timestamp()
