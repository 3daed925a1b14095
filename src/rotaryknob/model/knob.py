"""
Rotary Knob (Control Model)
===========================
The toolkit-independent knob: rotation state, display options, input handling
and change notification.

Why is this file needed?
------------------------
1. Decoupling: The control composes against two small protocols (`KnobHost`
   for focus and repaint requests, `DrawingSurface` for painting) instead of
   inheriting from a widget class, so it can be driven and tested without Qt.
2. Single policy: Wrapping, range clamping, snapping and focus-follows-pointer
   are options of one control rather than separate widget variants.

Classes:
    Key: Keys the knob reacts to.
    KnobHost: Capabilities the hosting widget provides.
    RotaryKnob: The control itself.
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from math import isfinite
from typing import Callable, Protocol

import numpy as np
from numpy import typing as npt

from rotaryknob.config import DEFAULT_DIAMETER, DEFAULT_TICK_SPACING, LABEL_FORMAT
from rotaryknob.model.geometry import DialGeometry
from rotaryknob.model.render import paint_knob
from rotaryknob.model.rotation import RotationRange, normalize_rotation, tick_directions
from rotaryknob.model.surface import DrawingSurface, LabelFont
from rotaryknob.model.vectors import angle_from_up, direction, dot

logger = logging.getLogger(__name__)

ValueListener = Callable[[float, float], None]


class Key(Enum):
    """Keys that step the rotation."""
    UP = auto()
    DOWN = auto()


class KnobHost(Protocol):
    def request_focus(self) -> None: ...

    def clear_focus(self) -> None: ...

    def schedule_repaint(self) -> None: ...


class RotaryKnob:
    """
    A circular dial whose value is an angle in degrees.

    0° points up and angles grow clockwise. Without a range the value wraps into
    [0, 360); with a range it is clamped instead. When snapping is enabled the
    value always sits on a multiple of the tick spacing.
    """

    def __init__(
        self,
        diameter: float = DEFAULT_DIAMETER,
        *,
        tick_spacing: float = DEFAULT_TICK_SPACING,
        host: KnobHost | None = None,
    ) -> None:
        if not (isfinite(tick_spacing) and tick_spacing > 0.0):
            raise ValueError(f"Tick spacing must be a positive number, got {tick_spacing}.")

        self.geometry = DialGeometry.from_diameter(diameter)
        self._host = host

        self._value: float = 0.0
        self._direction: npt.NDArray[np.float64] = direction(0.0)
        self._tick_spacing: float = float(tick_spacing)
        self._tick_marks: npt.NDArray[np.float64] = tick_directions(self._tick_spacing)
        self._range: RotationRange | None = None

        self._snap_to_ticks = False
        self._show_tick_marks = False
        self._show_value_label = False
        self._label_font = LabelFont()
        self._focus_follows_pointer = False

        self._enabled = True
        self._focused = False

        self._listeners: list[ValueListener] = []

    # ------------------------------------------------------------------------------
    # Value
    # ------------------------------------------------------------------------------

    def value(self) -> float:
        """Current normalized rotation in degrees."""
        return self._value

    def set_value(self, degrees: float) -> None:
        """Set the rotation. Out-of-domain values are wrapped or clamped, never rejected."""
        if not isfinite(degrees):
            logger.warning("Ignoring non-finite knob value %r.", degrees)
            return
        self._apply(float(degrees))

    def indicator_direction(self) -> npt.NDArray[np.float64]:
        """Unit vector of the indicator, ``(sin θ, -cos θ)``."""
        return self._direction.copy()

    def label_text(self) -> str:
        return LABEL_FORMAT.format(self._value)

    def add_value_listener(self, listener: ValueListener) -> None:
        """Register ``listener(old, new)``, called after every effective value change."""
        self._listeners.append(listener)

    def remove_value_listener(self, listener: ValueListener) -> None:
        self._listeners.remove(listener)

    # ------------------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------------------

    def tick_spacing(self) -> float:
        return self._tick_spacing

    def set_tick_spacing(self, spacing: float) -> None:
        """Set the degrees between tick marks and snap positions."""
        if not (isfinite(spacing) and spacing > 0.0):
            logger.warning("Ignoring invalid tick spacing %r; keeping %g.", spacing, self._tick_spacing)
            return
        if spacing == self._tick_spacing:
            return
        self._tick_spacing = float(spacing)
        self._tick_marks = tick_directions(self._tick_spacing)
        logger.debug("Tick spacing set to %g (%d marks).", spacing, len(self._tick_marks))
        self._apply(self._value)

    def tick_marks(self) -> npt.NDArray[np.float64]:
        """Cached (n, 2) array of tick directions."""
        return self._tick_marks

    def is_snap_to_ticks(self) -> bool:
        return self._snap_to_ticks

    def set_snap_to_ticks(self, enabled: bool) -> None:
        if enabled == self._snap_to_ticks:
            return
        self._snap_to_ticks = enabled
        self._apply(self._value)

    def is_show_tick_marks(self) -> bool:
        return self._show_tick_marks

    def set_show_tick_marks(self, visible: bool) -> None:
        self._show_tick_marks = visible
        self._repaint()

    def is_show_value_label(self) -> bool:
        return self._show_value_label

    def set_show_value_label(self, visible: bool) -> None:
        self._show_value_label = visible
        self._repaint()

    def label_font(self) -> LabelFont:
        return self._label_font

    def set_label_font(self, font: LabelFont) -> None:
        self._label_font = font
        self._repaint()

    def rotation_range(self) -> RotationRange | None:
        return self._range

    def set_range(self, minimum: float, maximum: float) -> None:
        """Clamp the value into [minimum, maximum] instead of wrapping it."""
        self._range = RotationRange.create(minimum, maximum)
        logger.debug("Knob range set to [%g, %g].", self._range.minimum, self._range.maximum)
        self._apply(self._value)

    def clear_range(self) -> None:
        """Return to wrapping into [0, 360)."""
        if self._range is None:
            return
        self._range = None
        self._apply(self._value)

    def is_focus_follows_pointer(self) -> bool:
        return self._focus_follows_pointer

    def set_focus_follows_pointer(self, enabled: bool) -> None:
        """When enabled, releasing the pointer outside the dial gives up focus."""
        self._focus_follows_pointer = enabled

    # ------------------------------------------------------------------------------
    # Host state
    # ------------------------------------------------------------------------------

    def attach(self, host: KnobHost | None) -> None:
        self._host = host
        self._repaint()

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        self._repaint()

    def has_focus(self) -> bool:
        return self._focused

    def focus_changed(self, focused: bool) -> None:
        """Called by the host whenever keyboard focus moves to or away from the knob."""
        self._focused = focused
        self._repaint()

    # ------------------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------------------

    def step(self) -> float:
        """Rotation per scroll unit or key press: one tick when snapping, else one degree."""
        return self._tick_spacing if self._snap_to_ticks else 1.0

    def pointer_pressed(self, x: float, y: float) -> None:
        if self._enabled and not self._focused and self.geometry.contains(x, y) and self._host is not None:
            self._host.request_focus()

    def pointer_dragged(self, x: float, y: float) -> None:
        if not self._enabled:
            return
        offset = self.geometry.offset(x, y)
        if dot(offset, offset) == 0.0:
            # No direction at the exact center
            return
        self.set_value(angle_from_up(offset))

    def pointer_released(self, x: float, y: float) -> None:
        if (
            self._focus_follows_pointer
            and self._focused
            and not self.geometry.contains(x, y)
            and self._host is not None
        ):
            self._host.clear_focus()

    def scrolled(self, delta_x: float, delta_y: float, horizontal: bool = False) -> None:
        """
        Rotate by scroll units.

        Args:
            delta_x: Horizontal scroll amount in units (notches).
            delta_y: Vertical scroll amount in units (notches).
            horizontal: Use ``delta_x`` instead of ``delta_y`` (e.g. Shift held).
        """
        if not self._enabled:
            return
        delta = delta_x if horizontal else delta_y
        if delta == 0.0:
            return
        self.set_value(self._value + delta * self.step())

    def key_pressed(self, key: Key) -> bool:
        """Step the rotation for UP/DOWN. Returns whether the key was handled."""
        if not self._enabled:
            return False
        if key is Key.UP:
            self.set_value(self._value - self.step())
        elif key is Key.DOWN:
            self.set_value(self._value + self.step())
        else:
            return False
        return True

    # ------------------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------------------

    def paint(self, surface: DrawingSurface) -> None:
        paint_knob(self, surface)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _apply(self, raw: float) -> None:
        old = self._value
        new = normalize_rotation(
            raw,
            tick_spacing=self._tick_spacing,
            snap_to_ticks=self._snap_to_ticks,
            rotation_range=self._range,
        )
        self._value = new
        self._direction = direction(new)
        self._repaint()
        if new != old:
            for listener in list(self._listeners):
                listener(old, new)

    def _repaint(self) -> None:
        if self._host is not None:
            self._host.schedule_repaint()
