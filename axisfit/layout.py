from __future__ import annotations

import logging
import math

from axisfit.model import AxisGeometry, AxisSpec


LOGGER = logging.getLogger(__name__)


def layout_horizontally(spec: AxisSpec, available_space: float, fill_to_edge: bool = False) -> AxisGeometry:
    """Fit a horizontal axis into ``available_space`` pixels.

    With ``fill_to_edge`` the outer tick labels may run to the plot edges
    instead of sitting centred in their bands. Numeric axes always behave that
    way.
    """
    if available_space < 0:
        raise ValueError("available_space must be >= 0")
    if not spec.exists():
        return AxisGeometry(tick_count=spec.tick_count)
    s = spec.settings

    tick_width = spec.max_category_width() + s.tick_margin_px
    if tick_width > available_space * 0.5:
        tick_width = int(available_space * 0.5)
    tick_count = spec.count_ticks()

    if not spec.categorical:
        fill_to_edge = True

    # Outer labels overhang the plot by half a tick either side.
    if fill_to_edge:
        available_space -= tick_width

    space_for_one_tick = int(available_space / tick_count)

    if spec.categorical and available_space < tick_width * tick_count:
        tick_values = spec.skipping_tick_values(available_space, tick_count)
        # 45 degree rotation; width and height of the label box are equal.
        tick_height = int(tick_width / math.sqrt(2))
        if fill_to_edge:
            right_gutter = s.rotated_right_gutter_px
            left_gutter = max(0, tick_height - s.rotated_left_offset_px)
        else:
            right_gutter = max(0, s.rotated_right_gutter_px - space_for_one_tick // 2)
            left_gutter = max(0, tick_height - s.rotated_left_offset_px - space_for_one_tick // 2)
        LOGGER.debug(
            "%s: rotating %d ticks of width %d into %.1fpx",
            spec.scale_name,
            tick_count,
            tick_width,
            available_space,
        )
        return AxisGeometry(
            rotated_ticks=True,
            tick_values=tick_values,
            tick_count=spec.tick_count,
            size=tick_height + s.rotated_tick_mark_px + spec.title_height(),
            left_gutter=left_gutter,
            right_gutter=right_gutter,
        )

    if fill_to_edge:
        gutter = tick_width // 2
    else:
        gutter = max(0, tick_width // 2 - space_for_one_tick // 2)

    resolved_count = spec.tick_count
    if available_space < tick_width * tick_count and resolved_count is None:
        # Only numeric axes reach here; ask the renderer for fewer, wider ticks.
        resolved_count = max(0, int(available_space / (tick_width + s.tick_margin_px)))
        LOGGER.debug("%s: reducing tick count %d -> %d", spec.scale_name, tick_count, resolved_count)

    return AxisGeometry(
        tick_count=resolved_count,
        size=spec.estimated_simple_size_when_horizontal(),
        left_gutter=gutter,
        right_gutter=gutter,
    )


def layout_vertically(spec: AxisSpec, available_space: float) -> AxisGeometry:
    if available_space < 0:
        raise ValueError("available_space must be >= 0")
    if not spec.exists():
        return AxisGeometry(tick_count=spec.tick_count)
    s = spec.settings
    tick_count = spec.count_ticks()

    gutter = s.vertical_gutter_px
    available_space -= 2 * gutter

    tick_values = None
    resolved_count = spec.tick_count
    if spec.categorical:
        tick_values = spec.skipping_tick_values(available_space, tick_count)
    elif s.vertical_tick_spacing_px * tick_count > available_space and resolved_count is None:
        resolved_count = max(0, int(available_space / s.vertical_tick_spacing_px))
        LOGGER.debug("%s: reducing tick count %d -> %d", spec.scale_name, tick_count, resolved_count)

    if tick_values is None:
        size = spec.max_category_width()
    else:
        size = spec.max_tick_width(tick_values)
    size += spec.title_height() + s.vertical_tick_mark_px

    return AxisGeometry(
        tick_values=tick_values,
        tick_count=resolved_count,
        size=size,
        top_gutter=gutter,
        bottom_gutter=gutter,
    )
