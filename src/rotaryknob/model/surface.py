"""
Drawing primitives the knob needs from its host toolkit.

The knob paints through this small protocol only, so any toolkit (or a test
double) can provide the surface.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

Point = tuple[float, float]


@dataclass(frozen=True)
class Color:
    """RGB colour with an alpha in [0, 1]."""
    red: int
    green: int
    blue: int
    alpha: float = 1.0

    @classmethod
    def from_rgb(cls, rgb: tuple[int, int, int], alpha: float = 1.0) -> Color:
        return cls(rgb[0], rgb[1], rgb[2], alpha)

    def with_opacity(self, opacity: float) -> Color:
        """Return a copy whose alpha is scaled by ``opacity``."""
        return replace(self, alpha=self.alpha * opacity)


@dataclass(frozen=True)
class LabelFont:
    """Font used by the angle readout."""
    family: str = ""
    point_size: float = 12.0
    bold: bool = False


class DrawingSurface(Protocol):
    def clear(self, width: float, height: float) -> None: ...

    def fill_radial_gradient_disc(self, center: Point, radius: float, inner: Color, outer: Color) -> None: ...

    def fill_disc(self, center: Point, radius: float, color: Color) -> None: ...

    def stroke_circle(self, center: Point, radius: float, color: Color, width: float) -> None: ...

    def stroke_line(self, start: Point, end: Point, color: Color, width: float) -> None: ...

    def draw_text(self, center: Point, text: str, font: LabelFont, color: Color) -> None: ...
