from __future__ import annotations

from typing import TYPE_CHECKING

from rotaryknob.config import (
    ACCENT_COLOR, BODY_LIGHT_COLOR, BODY_DARK_COLOR, OUTLINE_COLOR, TICK_COLOR,
    INDICATOR_COLOR, LABEL_COLOR, DISABLED_OPACITY, FOCUSED_OUTLINE_WIDTH,
    OUTLINE_WIDTH, TICK_WIDTH,
)
from rotaryknob.model.surface import Color, DrawingSurface

if TYPE_CHECKING:
    from rotaryknob.model.knob import RotaryKnob


def paint_knob(knob: RotaryKnob, surface: DrawingSurface) -> None:
    """
    Immediate-mode paint of the whole dial.

    Order: clear, gradient body, outline, tick marks (enabled and visible only),
    indicator disc, value label. A disabled knob is painted at reduced opacity.
    """
    geometry = knob.geometry
    enabled = knob.is_enabled()
    opacity = 1.0 if enabled else DISABLED_OPACITY

    def color(rgb: tuple[int, int, int]) -> Color:
        return Color.from_rgb(rgb).with_opacity(opacity)

    surface.clear(geometry.size, geometry.size)
    surface.fill_radial_gradient_disc(
        geometry.center, geometry.radius, color(BODY_LIGHT_COLOR), color(BODY_DARK_COLOR)
    )

    if knob.has_focus() and enabled:
        surface.stroke_circle(geometry.center, geometry.radius, color(ACCENT_COLOR), FOCUSED_OUTLINE_WIDTH)
    else:
        surface.stroke_circle(geometry.center, geometry.radius, color(OUTLINE_COLOR), OUTLINE_WIDTH)

    if enabled and knob.is_show_tick_marks():
        tick_color = color(TICK_COLOR)
        for mark in knob.tick_marks():
            start, end = geometry.tick_segment(mark)
            surface.stroke_line(start, end, tick_color, TICK_WIDTH)

    surface.fill_disc(
        geometry.indicator_position(knob.indicator_direction()), geometry.indicator_radius, color(INDICATOR_COLOR)
    )

    if knob.is_show_value_label():
        surface.draw_text(geometry.center, knob.label_text(), knob.label_font(), color(LABEL_COLOR))
