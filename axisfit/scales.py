from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from axisfit.fields import FieldStats


def sample_divisions(field: "FieldStats", divisions: int = 5, *, pad_ratio: float = 0.0) -> np.ndarray:
    """Representative tick values a renderer would place on a numeric scale for ``field``."""
    if field.min is None or field.max is None:
        return np.asarray([], dtype=np.float64)
    vmin = float(field.min)
    vmax = float(field.max)
    if pad_ratio > 0 and vmax > vmin:
        pad = (vmax - vmin) * pad_ratio
        vmin -= pad
        vmax += pad
    return generate_nice_ticks(vmin, vmax, divisions)


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    if target <= 0:
        raise ValueError("target must be > 0")
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)
    if vmin > vmax:
        vmin, vmax = vmax, vmin

    span = _nice_number(vmax - vmin, round_result=False)
    step = _nice_number(span / max(target - 1, 1), round_result=True)
    tick_min = np.floor(vmin / step) * step
    tick_max = np.ceil(vmax / step) * step

    ticks = np.arange(tick_min, tick_max + 0.5 * step, step, dtype=np.float64)
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def format_tick(value: float) -> str:
    if not np.isfinite(value):
        return str(value)
    abs_v = abs(value)
    if abs_v != 0 and (abs_v >= 1e15 or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    try:
        q = d.quantize(Decimal("0.000001"))
    except InvalidOperation:
        q = d
    out = format(q, "f")
    # Only trim trailing zeros for fractional values (preserve integer zeros like 30, 40).
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def _nice_number(value: float, *, round_result: bool) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))
