"""
Rotation rules of the knob: wrapping, clamping, snapping and the tick-mark cache.

All functions here are pure; the knob calls them on every value change.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import floor, isfinite

import numpy as np
from numpy import typing as npt

from rotaryknob.config import FULL_TURN


@dataclass(frozen=True)
class RotationRange:
    """Closed [minimum, maximum] interval used instead of wrapping."""
    minimum: float
    maximum: float

    @classmethod
    def create(cls, minimum: float, maximum: float) -> RotationRange:
        """Build a range with swapped bounds fixed and both bounds inside [0, 360]."""
        if not (isfinite(minimum) and isfinite(maximum)):
            raise ValueError(f"Range bounds must be finite, got ({minimum}, {maximum}).")
        lo, hi = sorted((minimum, maximum))
        lo = min(max(lo, 0.0), FULL_TURN)
        hi = min(max(hi, 0.0), FULL_TURN)
        return cls(lo, hi)

    def clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)

    def __contains__(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


def wrap(value: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = value % FULL_TURN
    # -1e-20 % 360 rounds to 360.0
    return 0.0 if wrapped >= FULL_TURN else wrapped


def round_to_tick(value: float, tick_spacing: float) -> float:
    """Round half up to the nearest multiple of ``tick_spacing``."""
    return tick_spacing * floor(value / tick_spacing + 0.5)


def snap(value: float, tick_spacing: float) -> float:
    """
    Snap a wrapped angle to the nearest tick.

    Values within half a tick of 0° on either side of the wrap boundary collapse
    to exactly 0, so the lowest and highest tick never split the zero position.
    """
    half_tick = tick_spacing * 0.5
    if value < half_tick or value > FULL_TURN - half_tick:
        return 0.0
    return wrap(round_to_tick(value, tick_spacing))


def snap_in_range(value: float, tick_spacing: float, rotation_range: RotationRange) -> float:
    """Snap to the nearest tick that lies inside the range, or clamp if none does."""
    snapped = round_to_tick(value, tick_spacing)
    if snapped in rotation_range:
        return snapped
    # Step one tick back towards the range
    stepped = snapped - tick_spacing if snapped > rotation_range.maximum else snapped + tick_spacing
    if stepped in rotation_range:
        return stepped
    return rotation_range.clamp(value)


def normalize_rotation(
    value: float,
    *,
    tick_spacing: float,
    snap_to_ticks: bool = False,
    rotation_range: RotationRange | None = None,
) -> float:
    """
    Bring a raw rotation into the knob's domain.

    Args:
        value: Raw angle in degrees, possibly negative or beyond a full turn.
        tick_spacing: Degrees between adjacent ticks (> 0).
        snap_to_ticks: Whether the result must sit on a tick.
        rotation_range: When given, clamp into it instead of wrapping.

    Returns:
        The normalized angle in degrees.
    """
    if rotation_range is None:
        wrapped = wrap(value)
        return snap(wrapped, tick_spacing) if snap_to_ticks else wrapped

    clamped = rotation_range.clamp(value)
    if snap_to_ticks:
        return snap_in_range(clamped, tick_spacing, rotation_range)
    return clamped


def tick_directions(tick_spacing: float) -> npt.NDArray[np.float64]:
    """
    Unit direction vectors of all tick marks.

    Args:
        tick_spacing: Degrees between ticks (> 0).

    Returns:
        An array of shape (n, 2) with one ``(sin θ, -cos θ)`` row per tick at
        ``0, spacing, 2*spacing, ...`` strictly below 360°.
    """
    angles = np.radians(np.arange(0.0, FULL_TURN, tick_spacing))
    return np.column_stack((np.sin(angles), -np.cos(angles)))
