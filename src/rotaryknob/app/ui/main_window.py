"""
Demo window: one knob with controls for its options.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QEvent, QObject, Slot
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox, QCheckBox,
    QSlider, QLabel, QStatusBar
)

from rotaryknob.app.application import VISIBLE_APP_NAME
from rotaryknob.app.ui.knob_widget import KnobWidget
from rotaryknob.model.surface import LabelFont

logger = logging.getLogger(__name__)

DEMO_TICK_SPACING = 30.0
DEMO_FONT = LabelFont(point_size=16.0)


class DemoWindow(QMainWindow):
    """
    Hosts a single knob. Holding Shift while the knob has focus enables snapping
    and tick marks until Shift is released.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(500, 400)

        central = QWidget(self)
        v = QVBoxLayout(central)

        self.knob_widget = KnobWidget(parent=central, tick_spacing=DEMO_TICK_SPACING)
        knob = self.knob_widget.knob
        knob.set_label_font(DEMO_FONT)
        knob.set_show_value_label(True)
        knob.set_snap_to_ticks(False)
        self.knob_widget.valueChanged.connect(self._on_value_changed)
        self.knob_widget.installEventFilter(self)

        row = QHBoxLayout()
        row.addStretch(1)
        row.addWidget(self.knob_widget)
        row.addStretch(1)
        v.addLayout(row, 1)
        v.addWidget(self._build_options(central))

        self.setCentralWidget(central)
        self.setStatusBar(QStatusBar(self))
        self._show_value(knob.value())

    # ------------------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------------------

    def _build_options(self, parent: QWidget) -> QGroupBox:
        box = QGroupBox(self.tr("Options"), parent)
        form = QFormLayout(box)

        self.chk_label = QCheckBox(self.tr("Show angle"), box)
        self.chk_label.setChecked(True)
        self.chk_label.toggled.connect(self.knob_widget.knob.set_show_value_label)
        form.addRow(self.chk_label)

        self.chk_focus = QCheckBox(self.tr("Release focus outside the dial"), box)
        self.chk_focus.toggled.connect(self.knob_widget.knob.set_focus_follows_pointer)
        form.addRow(self.chk_focus)

        self.chk_enabled = QCheckBox(self.tr("Enabled"), box)
        self.chk_enabled.setChecked(True)
        self.chk_enabled.toggled.connect(self.knob_widget.setEnabled)
        form.addRow(self.chk_enabled)

        self.chk_range = QCheckBox(self.tr("Limit to range"), box)
        self.chk_range.toggled.connect(self._apply_range)
        form.addRow(self.chk_range)

        self.sld_min = self._make_slider(box, 0)
        self.sld_max = self._make_slider(box, 270)
        self.lbl_min = QLabel(box)
        self.lbl_max = QLabel(box)
        form.addRow(self.tr("Minimum:"), self._slider_row(self.sld_min, self.lbl_min))
        form.addRow(self.tr("Maximum:"), self._slider_row(self.sld_max, self.lbl_max))
        self._update_range_labels()
        return box

    def _make_slider(self, parent: QWidget, value: int) -> QSlider:
        s = QSlider(Qt.Orientation.Horizontal, parent)
        s.setRange(0, 360)
        s.setValue(value)
        s.valueChanged.connect(self._apply_range)
        return s

    @staticmethod
    def _slider_row(slider: QSlider, label: QLabel) -> QWidget:
        w = QWidget()
        h = QHBoxLayout(w)
        h.setContentsMargins(0, 0, 0, 0)
        h.addWidget(slider, 1)
        h.addWidget(label, 0)
        return w

    # ------------------------------------------------------------------------------
    # Slots / events
    # ------------------------------------------------------------------------------

    @Slot()
    def _apply_range(self) -> None:
        self._update_range_labels()
        knob = self.knob_widget.knob
        if self.chk_range.isChecked():
            knob.set_range(self.sld_min.value(), self.sld_max.value())
        else:
            knob.clear_range()

    def _update_range_labels(self) -> None:
        self.lbl_min.setText(f"{self.sld_min.value()}°")
        self.lbl_max.setText(f"{self.sld_max.value()}°")

    @Slot(float)
    def _on_value_changed(self, value: float) -> None:
        logger.info("Knob value: %.1f", value)
        self._show_value(value)

    def _show_value(self, value: float) -> None:
        self.statusBar().showMessage(self.tr("Value: {0:.1f}°").format(value))

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self.knob_widget and event.type() in (QEvent.Type.KeyPress, QEvent.Type.KeyRelease):
            if event.key() == Qt.Key.Key_Shift and not event.isAutoRepeat():
                self.set_snapping(event.type() == QEvent.Type.KeyPress)
        return super().eventFilter(watched, event)

    def set_snapping(self, enabled: bool) -> None:
        """Toggle snapping and tick marks together."""
        knob = self.knob_widget.knob
        knob.set_snap_to_ticks(enabled)
        knob.set_show_tick_marks(enabled)
