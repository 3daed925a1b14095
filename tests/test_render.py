import pytest

from rotaryknob.config import ACCENT_COLOR, DISABLED_OPACITY, INDICATOR_COLOR, OUTLINE_COLOR
from rotaryknob.model.surface import Color, LabelFont


def test_default_paint_order(knob, surface):
    knob.paint(surface)
    assert surface.names() == ["clear", "fill_radial_gradient_disc", "stroke_circle", "fill_disc"]
    assert surface.of("clear") == [(104.0, 104.0)]


def test_unfocused_outline_is_thin_gray(knob, surface):
    knob.paint(surface)
    (center, radius, color, width), = surface.of("stroke_circle")
    assert center == (52.0, 52.0)
    assert radius == 50.0
    assert color == Color.from_rgb(OUTLINE_COLOR)
    assert width == 1.0


def test_focused_outline_uses_accent(knob, surface):
    knob.focus_changed(True)
    knob.paint(surface)
    (_, _, color, width), = surface.of("stroke_circle")
    assert color == Color.from_rgb(ACCENT_COLOR)
    assert width == 2.0


def test_indicator_projected_along_direction(knob, surface):
    knob.set_value(90)
    knob.paint(surface)
    (center, radius, color), = surface.of("fill_disc")
    # radius 50 - indicator radius 5 - inset 5
    assert center == pytest.approx((92.0, 52.0))
    assert radius == 5.0
    assert color == Color.from_rgb(INDICATOR_COLOR)


def test_tick_marks_drawn_only_when_visible(knob, surface):
    knob.set_tick_spacing(30)
    knob.paint(surface)
    assert surface.of("stroke_line") == []

    knob.set_show_tick_marks(True)
    knob.paint(surface)
    lines = surface.of("stroke_line")
    assert len(lines) == 12
    start, end, _, _ = lines[0]
    # first tick points straight up, from radius 43 to radius 40
    assert start == pytest.approx((52.0, 9.0))
    assert end == pytest.approx((52.0, 12.0))


def test_disabled_knob_is_faded_and_hides_ticks(knob, surface):
    knob.set_show_tick_marks(True)
    knob.focus_changed(True)
    knob.set_enabled(False)
    knob.paint(surface)
    assert surface.of("stroke_line") == []
    (_, _, color, width), = surface.of("stroke_circle")
    assert color == Color.from_rgb(OUTLINE_COLOR, DISABLED_OPACITY)
    assert width == 1.0
    (_, _, indicator), = surface.of("fill_disc")
    assert indicator.alpha == pytest.approx(DISABLED_OPACITY)


def test_value_label(knob, surface):
    font = LabelFont(point_size=16.0)
    knob.set_label_font(font)
    knob.set_show_value_label(True)
    knob.set_value(12.345)
    knob.paint(surface)
    (center, text, used_font, _), = surface.of("draw_text")
    assert center == (52.0, 52.0)
    assert text == "12.3°"
    assert used_font == font
