from __future__ import annotations

import pytest

from rotaryknob.model.knob import RotaryKnob
from rotaryknob.model.surface import Color, LabelFont, Point


class FakeHost:
    """Records what the knob asks of its host."""
    def __init__(self) -> None:
        self.repaints = 0
        self.focus_requests = 0
        self.focus_clears = 0

    def request_focus(self) -> None:
        self.focus_requests += 1

    def clear_focus(self) -> None:
        self.focus_clears += 1

    def schedule_repaint(self) -> None:
        self.repaints += 1


class RecordingSurface:
    """DrawingSurface that stores every primitive call as (name, args)."""
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def of(self, name: str) -> list[tuple]:
        return [args for n, args in self.calls if n == name]

    def clear(self, width: float, height: float) -> None:
        self.calls.append(("clear", (width, height)))

    def fill_radial_gradient_disc(self, center: Point, radius: float, inner: Color, outer: Color) -> None:
        self.calls.append(("fill_radial_gradient_disc", (center, radius, inner, outer)))

    def fill_disc(self, center: Point, radius: float, color: Color) -> None:
        self.calls.append(("fill_disc", (center, radius, color)))

    def stroke_circle(self, center: Point, radius: float, color: Color, width: float) -> None:
        self.calls.append(("stroke_circle", (center, radius, color, width)))

    def stroke_line(self, start: Point, end: Point, color: Color, width: float) -> None:
        self.calls.append(("stroke_line", (start, end, color, width)))

    def draw_text(self, center: Point, text: str, font: LabelFont, color: Color) -> None:
        self.calls.append(("draw_text", (center, text, font, color)))


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def knob(host: FakeHost) -> RotaryKnob:
    # diameter 100, padding 2 -> center (52, 52), radius 50
    return RotaryKnob(100, host=host)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
