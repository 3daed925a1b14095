from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy import typing as npt

from rotaryknob.config import (
    DEFAULT_DIAMETER, DEFAULT_PADDING, MIN_RADIUS, INDICATOR_RADIUS, INDICATOR_INSET
)


@dataclass(frozen=True)
class DialGeometry:
    """
    Fixed layout of one dial, in surface coordinates.

    The dial disc sits ``padding`` pixels from the top-left corner of a square
    surface of side ``diameter + 2 * padding``.
    """
    diameter: float
    padding: float
    radius: float
    indicator_radius: float
    center: tuple[float, float]

    @classmethod
    def from_diameter(cls, diameter: float = DEFAULT_DIAMETER, padding: float = DEFAULT_PADDING) -> DialGeometry:
        radius = max(MIN_RADIUS, diameter * 0.5)
        diameter = 2.0 * radius
        center = (padding + radius, padding + radius)
        return cls(
            diameter=diameter,
            padding=padding,
            radius=radius,
            indicator_radius=INDICATOR_RADIUS,
            center=center,
        )

    @property
    def size(self) -> float:
        """Side length of the square surface the dial needs."""
        return self.diameter + 2.0 * self.padding

    def offset(self, x: float, y: float) -> npt.NDArray[np.float64]:
        """Vector from the dial center to a surface point."""
        return np.array([x - self.center[0], y - self.center[1]])

    def contains(self, x: float, y: float) -> bool:
        """Whether a surface point lies on the dial (squared distance, no sqrt)."""
        dx = x - self.center[0]
        dy = y - self.center[1]
        return dx * dx + dy * dy <= self.radius * self.radius

    def point_at(self, direction: npt.NDArray[np.float64], distance: float) -> tuple[float, float]:
        """Project ``distance`` along a unit ``direction`` from the center."""
        return (
            float(self.center[0] + distance * direction[0]),
            float(self.center[1] + distance * direction[1]),
        )

    def indicator_position(self, direction: npt.NDArray[np.float64]) -> tuple[float, float]:
        """Center of the indicator disc for the given unit direction."""
        return self.point_at(direction, self.radius - self.indicator_radius - INDICATOR_INSET)

    def tick_segment(
        self, direction: npt.NDArray[np.float64]
    ) -> tuple[tuple[float, float], tuple[float, float]]:
        """Inner and outer end of a tick mark near the rim."""
        outer = self.point_at(direction, self.radius - self.indicator_radius - 2.0)
        inner = self.point_at(direction, self.radius - 2.0 * self.indicator_radius)
        return outer, inner
