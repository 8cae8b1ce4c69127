from axisfit.api import axis
from axisfit.descriptor import AxisDescriptor
from axisfit.errors import AxisConfigError, AxisLayoutError
from axisfit.fields import Field, FieldStats, Range, Scalar, TickValue
from axisfit.layout import layout_horizontally, layout_vertically
from axisfit.model import AxisGeometry, AxisSpec
from axisfit.settings import DEFAULT_SETTINGS, AxisLayoutSettings, load_settings
from axisfit.title import resolve_title

__all__ = [
    "AxisConfigError",
    "AxisDescriptor",
    "AxisGeometry",
    "AxisLayoutError",
    "AxisLayoutSettings",
    "AxisSpec",
    "DEFAULT_SETTINGS",
    "Field",
    "FieldStats",
    "Range",
    "Scalar",
    "TickValue",
    "axis",
    "layout_horizontally",
    "layout_vertically",
    "load_settings",
    "resolve_title",
]
