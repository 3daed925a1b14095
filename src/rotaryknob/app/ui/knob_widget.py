from __future__ import annotations

import logging
from math import ceil

from PySide6.QtCore import Qt, QEvent, QPointF, QRectF, QSize, Signal, Slot
from PySide6.QtGui import (
    QBrush, QColor, QFocusEvent, QFont, QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QPen,
    QRadialGradient, QWheelEvent
)
from PySide6.QtWidgets import QWidget

from rotaryknob.config import DEFAULT_DIAMETER, DEFAULT_TICK_SPACING
from rotaryknob.model.knob import Key, RotaryKnob
from rotaryknob.model.surface import Color, LabelFont, Point

logger = logging.getLogger(__name__)

# One wheel notch is reported as 120 eighths of a degree
WHEEL_NOTCH = 120.0


def _knob_key(code: int) -> Key | None:
    if code == Qt.Key.Key_Up:
        return Key.UP
    if code == Qt.Key.Key_Down:
        return Key.DOWN
    return None


def _qcolor(color: Color) -> QColor:
    return QColor(color.red, color.green, color.blue, round(color.alpha * 255))


class QPainterSurface:
    """`DrawingSurface` backed by an active QPainter."""
    def __init__(self, painter: QPainter) -> None:
        self._painter = painter

    def clear(self, width: float, height: float) -> None:
        self._painter.eraseRect(QRectF(0.0, 0.0, width, height))

    def fill_radial_gradient_disc(self, center: Point, radius: float, inner: Color, outer: Color) -> None:
        gradient = QRadialGradient(QPointF(*center), radius)
        gradient.setColorAt(0.0, _qcolor(inner))
        gradient.setColorAt(1.0, _qcolor(outer))
        self._painter.setPen(Qt.PenStyle.NoPen)
        self._painter.setBrush(QBrush(gradient))
        self._painter.drawEllipse(QPointF(*center), radius, radius)

    def fill_disc(self, center: Point, radius: float, color: Color) -> None:
        self._painter.setPen(Qt.PenStyle.NoPen)
        self._painter.setBrush(QBrush(_qcolor(color)))
        self._painter.drawEllipse(QPointF(*center), radius, radius)

    def stroke_circle(self, center: Point, radius: float, color: Color, width: float) -> None:
        self._painter.setPen(QPen(_qcolor(color), width))
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.drawEllipse(QPointF(*center), radius, radius)

    def stroke_line(self, start: Point, end: Point, color: Color, width: float) -> None:
        self._painter.setPen(QPen(_qcolor(color), width))
        self._painter.drawLine(QPointF(*start), QPointF(*end))

    def draw_text(self, center: Point, text: str, font: LabelFont, color: Color) -> None:
        qfont = QFont(font.family) if font.family else QFont(self._painter.font())
        qfont.setPointSizeF(font.point_size)
        qfont.setBold(font.bold)
        self._painter.setFont(qfont)
        self._painter.setPen(_qcolor(color))
        # Generous box centred on the dial; the text is aligned inside it
        box = QRectF(center[0] - 100.0, center[1] - 50.0, 200.0, 100.0)
        self._painter.drawText(box, Qt.AlignmentFlag.AlignCenter, text)


class KnobWidget(QWidget):
    """
    Qt host for a `RotaryKnob`.

    Forwards mouse, wheel, key and focus events to the knob, paints it through a
    `QPainterSurface` and re-emits value changes as a Qt signal.
    """
    valueChanged = Signal(float)

    def __init__(
        self,
        diameter: float = DEFAULT_DIAMETER,
        parent: QWidget | None = None,
        *,
        tick_spacing: float = DEFAULT_TICK_SPACING,
    ) -> None:
        super().__init__(parent)
        self.knob = RotaryKnob(diameter, tick_spacing=tick_spacing)
        self.knob.add_value_listener(self._relay_value)
        self.knob.attach(self)

        side = int(ceil(self.knob.geometry.size))
        self.setFixedSize(side, side)
        # Click focus is granted by the knob itself, only for presses on the dial
        self.setFocusPolicy(Qt.FocusPolicy.TabFocus)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def value(self) -> float:
        return self.knob.value()

    @Slot(float)
    def set_value(self, degrees: float) -> None:
        self.knob.set_value(degrees)

    def sizeHint(self) -> QSize:
        side = int(ceil(self.knob.geometry.size))
        return QSize(side, side)

    # ---- KnobHost ----

    def request_focus(self) -> None:
        self.setFocus(Qt.FocusReason.MouseFocusReason)

    def clear_focus(self) -> None:
        self.clearFocus()

    def schedule_repaint(self) -> None:
        self.update()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            self.knob.paint(QPainterSurface(painter))
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.knob.pointer_pressed(pos.x(), pos.y())
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if event.buttons() & Qt.MouseButton.LeftButton:
            pos = event.position()
            self.knob.pointer_dragged(pos.x(), pos.y())
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.knob.pointer_released(pos.x(), pos.y())
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        delta = event.angleDelta()
        # Windows and X11 keep a Shift+wheel notch on the y axis
        horizontal = bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier) and delta.x() != 0
        self.knob.scrolled(delta.x() / WHEEL_NOTCH, delta.y() / WHEEL_NOTCH, horizontal)
        event.accept()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key = _knob_key(event.key())
        if key is not None and self.knob.key_pressed(key):
            event.accept()
            return
        super().keyPressEvent(event)

    def focusInEvent(self, event: QFocusEvent) -> None:
        super().focusInEvent(event)
        self.knob.focus_changed(True)

    def focusOutEvent(self, event: QFocusEvent) -> None:
        super().focusOutEvent(event)
        self.knob.focus_changed(False)

    def changeEvent(self, event: QEvent) -> None:
        if event.type() == QEvent.Type.EnabledChange:
            self.knob.set_enabled(self.isEnabled())
        elif event.type() in (QEvent.Type.StyleChange, QEvent.Type.ParentChange):
            self.update()
        super().changeEvent(event)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _relay_value(self, old: float, new: float) -> None:
        logger.debug("Knob value %.3f -> %.3f", old, new)
        self.valueChanged.emit(new)
