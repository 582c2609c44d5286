"""
Render Settings Panel

Provides UI controls for interpolation, output resolution, histogram
equalization and the projection threshold.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout,
    QLabel, QSlider, QSpinBox, QComboBox, QCheckBox, QPushButton
)
from PySide6.QtCore import Qt, Signal

from config import DEFAULT_RENDER, MAX_OUTPUT_SIZE, MIN_OUTPUT_SIZE
from core.base import Interpolation


class SettingsPanel(QWidget):
    """Panel for render settings with Reset and Update actions."""

    # Emitted when the user asks to apply the current settings
    update_requested = Signal()
    # Emitted after the controls were restored to their defaults
    reset_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the panel UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        group = QGroupBox("Settings")
        form = QFormLayout(group)

        self._interp_combo = QComboBox()
        for mode in Interpolation:
            self._interp_combo.addItem(str(mode), mode)
        form.addRow("Interpolation Method:", self._interp_combo)

        self._width_spin = QSpinBox()
        self._width_spin.setRange(MIN_OUTPUT_SIZE, MAX_OUTPUT_SIZE)
        self._width_spin.setValue(DEFAULT_RENDER.output_width)
        self._width_spin.setSuffix(" px")
        form.addRow("Width:", self._width_spin)

        self._height_spin = QSpinBox()
        self._height_spin.setRange(MIN_OUTPUT_SIZE, MAX_OUTPUT_SIZE)
        self._height_spin.setValue(DEFAULT_RENDER.output_height)
        self._height_spin.setSuffix(" px")
        form.addRow("Height:", self._height_spin)

        self._equalize_check = QCheckBox()
        self._equalize_check.setChecked(DEFAULT_RENDER.equalize)
        form.addRow("Equalize:", self._equalize_check)

        threshold_row = QHBoxLayout()
        self._threshold_slider = QSlider(Qt.Horizontal)
        self._threshold_slider.setRange(0, 0)
        self._threshold_label = QLabel("0")
        self._threshold_label.setMinimumWidth(50)
        self._threshold_slider.valueChanged.connect(
            lambda v: self._threshold_label.setText(str(v))
        )
        threshold_row.addWidget(self._threshold_slider, stretch=1)
        threshold_row.addWidget(self._threshold_label)
        form.addRow("MIP Threshold:", threshold_row)

        button_row = QHBoxLayout()
        reset_btn = QPushButton("Reset")
        reset_btn.setObjectName("secondaryButton")
        reset_btn.clicked.connect(self._on_reset)
        button_row.addWidget(reset_btn)

        update_btn = QPushButton("Update")
        update_btn.clicked.connect(self.update_requested.emit)
        button_row.addWidget(update_btn)
        form.addRow(button_row)

        layout.addWidget(group)
        layout.addStretch()

    def set_threshold_range(self, minimum: int, maximum: int) -> None:
        """Update the threshold slider for a new volume (defaults to maximum)."""
        self._threshold_slider.setRange(minimum, maximum)
        self._threshold_slider.setValue(maximum)

    def _on_reset(self) -> None:
        """Restore every control to its default."""
        self._interp_combo.setCurrentIndex(
            self._interp_combo.findData(DEFAULT_RENDER.interpolation)
        )
        self._width_spin.setValue(DEFAULT_RENDER.output_width)
        self._height_spin.setValue(DEFAULT_RENDER.output_height)
        self._equalize_check.setChecked(DEFAULT_RENDER.equalize)
        self._threshold_slider.setValue(self._threshold_slider.maximum())
        self.reset_requested.emit()

    @property
    def interpolation(self) -> Interpolation:
        return self._interp_combo.currentData()

    @property
    def output_size(self):
        """Requested (width, height) in pixels."""
        return self._width_spin.value(), self._height_spin.value()

    @property
    def equalize(self) -> bool:
        return self._equalize_check.isChecked()

    @property
    def threshold(self) -> int:
        return self._threshold_slider.value()
