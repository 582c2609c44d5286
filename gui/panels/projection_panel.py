"""
Projection Panel

Displays the rotated maximum intensity projection with pitch, yaw and
roll sliders.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel, QSlider
)
from PySide6.QtCore import Qt

from config import DEFAULT_GUI
from core.base import RenderTarget
from core.data_manager import DataManager
from .image_view import RenderTargetView


class ProjectionPanel(QWidget):
    """Panel for the rotated MIP view."""

    def __init__(self, data_manager: DataManager, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._data_manager = data_manager
        self._target: RenderTarget = data_manager.new_target()
        self._sliders = {}
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the panel UI."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        view_group = QGroupBox("Maximum Intensity Projection")
        view_layout = QVBoxLayout(view_group)
        self._view = RenderTargetView()
        view_layout.addWidget(self._view)
        layout.addWidget(view_group, stretch=1)

        angle_group = QGroupBox("Rotation")
        angle_layout = QVBoxLayout(angle_group)
        low, high = DEFAULT_GUI.angle_range

        for name in ("Pitch", "Yaw", "Roll"):
            row = QHBoxLayout()
            row.addWidget(QLabel(f"{name}:"))

            slider = QSlider(Qt.Horizontal)
            slider.setRange(low, high)
            slider.setValue(0)
            slider.setTickInterval(45)
            slider.setTickPosition(QSlider.TicksBelow)
            slider.valueChanged.connect(self._on_angle_changed)
            slider.sliderReleased.connect(self._on_angle_changed)
            row.addWidget(slider, stretch=1)

            value_label = QLabel("0°")
            value_label.setMinimumWidth(40)
            slider.valueChanged.connect(lambda v, lbl=value_label: lbl.setText(f"{v}°"))
            row.addWidget(value_label)

            self._sliders[name] = slider
            angle_layout.addLayout(row)

        angle_layout.addStretch()
        layout.addWidget(angle_group)

    @property
    def angles(self):
        """Current (pitch, yaw, roll) in degrees."""
        return tuple(self._sliders[name].value() for name in ("Pitch", "Yaw", "Roll"))

    def reallocate(self) -> None:
        """Allocate a new target at the session's output size."""
        self._target = self._data_manager.new_target()

    def redraw(self) -> None:
        """Render the projection at the current angles and show it."""
        if not self._data_manager.has_volume:
            return
        self._data_manager.render_projection_degrees(self._target, *self.angles)
        self._view.show_target(self._target)

    def _on_angle_changed(self, *_) -> None:
        # Projections are costly; wait until no slider is being dragged
        if any(slider.isSliderDown() for slider in self._sliders.values()):
            return
        self.redraw()
