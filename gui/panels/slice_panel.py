"""
Slice Panel

Displays one axis-aligned slice with a slider selecting the slice index.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QSlider
from PySide6.QtCore import Qt

from core.base import Axis, RenderTarget
from core.data_manager import DataManager
from .image_view import RenderTargetView


class SlicePanel(QWidget):
    """Panel showing the slice of one axis."""

    def __init__(self, axis: Axis, data_manager: DataManager,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._axis = axis
        self._data_manager = data_manager
        self._target: RenderTarget = data_manager.new_target()
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the panel UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        group = QGroupBox(f"{self._axis.value} Axis")
        group_layout = QVBoxLayout(group)

        self._view = RenderTargetView()
        group_layout.addWidget(self._view, stretch=1)

        self._slider = QSlider(Qt.Horizontal)
        self._slider.setRange(0, 0)
        self._slider.valueChanged.connect(self._on_slider_changed)
        group_layout.addWidget(self._slider)

        layout.addWidget(group)

    @property
    def axis(self) -> Axis:
        return self._axis

    @property
    def slice_index(self) -> int:
        return self._slider.value()

    def set_volume(self, volume) -> None:
        """Update the slider range for a new volume and redraw."""
        count = volume.axis_length(self._axis)
        self._slider.blockSignals(True)
        self._slider.setRange(0, count - 1)
        self._slider.setValue(min(self._slider.value(), count - 1))
        self._slider.blockSignals(False)
        self.redraw()

    def reallocate(self) -> None:
        """Allocate a new target at the session's output size."""
        self._target = self._data_manager.new_target()

    def redraw(self) -> None:
        """Render the current slice and show it."""
        if not self._data_manager.has_volume:
            return
        self._data_manager.render_slice(self._target, self._axis, self.slice_index)
        self._view.show_target(self._target)

    def _on_slider_changed(self, value: int) -> None:
        logging.debug(f"{self._axis.value} slice -> {value}")
        self.redraw()
