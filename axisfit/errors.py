from __future__ import annotations


class AxisLayoutError(RuntimeError):
    pass


class AxisConfigError(ValueError):
    pass
