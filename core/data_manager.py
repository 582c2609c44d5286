"""
Data Manager

Centralized rendering session state for the application.
"""

import logging
import math
from dataclasses import replace
from typing import Optional

from PySide6.QtCore import QObject, Signal

from config import DEFAULT_RENDER, MAX_OUTPUT_SIZE, MIN_OUTPUT_SIZE, RenderConfig
from core.base import Axis, RenderTarget, check_dimensions
from sampling.field import VolumeField
from sampling.resizer import Resizer
from visualization.colormap import ColorMapper
from visualization.projector import Projector
from visualization.slice_renderer import SliceRenderer


class DataManager(QObject):
    """
    Manages the rendering session.

    Provides a centralized location for:
    - The active VolumeField (replaced wholesale, never mutated)
    - Render settings (interpolation, resolution, equalize, threshold, colour)
    - State change notifications via signals
    """

    # Signals
    volume_changed = Signal(object)  # Emits VolumeField or None
    settings_changed = Signal()

    def __init__(self, config: Optional[RenderConfig] = None, parent=None):
        super().__init__(parent)
        config = config or replace(DEFAULT_RENDER)

        self._volume: Optional[VolumeField] = None
        self._config = config
        self._color_mapper = ColorMapper(config.base_color)
        self._slice_renderer = SliceRenderer(self._color_mapper)
        self._projector = Projector(self._color_mapper, config.threshold, config.projector_workers)
        self._resizer = Resizer()

    @property
    def volume(self) -> Optional[VolumeField]:
        """Current volume field."""
        return self._volume

    @property
    def has_volume(self) -> bool:
        """Whether a volume is loaded."""
        return self._volume is not None

    @property
    def config(self) -> RenderConfig:
        """Current render settings."""
        return self._config

    @property
    def threshold(self) -> Optional[int]:
        """Effective projection threshold (field maximum by default)."""
        if self._volume is None:
            return self._projector.threshold
        return self._projector.effective_threshold(self._volume)

    def set_volume(self, volume: Optional[VolumeField]) -> None:
        """
        Set the active volume field.

        The projection threshold is reset to the new field's maximum.

        Args:
            volume: VolumeField instance or None to clear
        """
        self._volume = volume
        self._projector.threshold = None
        self._config.threshold = None
        self.volume_changed.emit(volume)
        if volume is not None:
            logging.info(f"Volume set: {volume.dimensions} (WxHxD)")

    def resize_volume(self, width: int, depth: int, height: int) -> VolumeField:
        """
        Replace the active field with a resampled copy.

        Args:
            width: New number of voxels along x
            depth: New number of voxels along y
            height: New number of voxels along z

        Returns:
            The new active VolumeField
        """
        if self._volume is None:
            raise RuntimeError("No volume loaded")
        resized = self._resizer.resize_field(self._volume, width, depth, height)
        self.set_volume(resized)
        return resized

    def set_interpolation(self, mode) -> None:
        self._config.interpolation = mode
        self.settings_changed.emit()

    def set_equalize(self, enabled: bool) -> None:
        self._config.equalize = bool(enabled)
        self.settings_changed.emit()

    def set_threshold(self, value: Optional[int]) -> None:
        """
        Set the projection threshold, clamped into the field's [min, max].

        Args:
            value: Threshold or None for the field maximum
        """
        if value is not None and self._volume is not None:
            value = max(self._volume.min, min(int(value), self._volume.max))
        self._projector.threshold = value
        self._config.threshold = value
        self.settings_changed.emit()

    def set_base_color(self, color) -> None:
        self._color_mapper.base_color = color
        self._config.base_color = self._color_mapper.base_color
        self.settings_changed.emit()

    def set_output_size(self, width: int, height: int) -> None:
        """
        Set the output resolution used for new render targets.

        Raises:
            InvalidDimensionsError: If a dimension is zero or negative
            ValueError: If a dimension is outside the supported range
        """
        check_dimensions(width, height)
        for size in (width, height):
            if size < MIN_OUTPUT_SIZE or size > MAX_OUTPUT_SIZE:
                raise ValueError(
                    f"Width and height must be between {MIN_OUTPUT_SIZE} and {MAX_OUTPUT_SIZE}"
                )
        self._config.output_width = int(width)
        self._config.output_height = int(height)
        self.settings_changed.emit()

    def reset_settings(self) -> None:
        """Restore default render settings (interpolation, size, equalize, threshold)."""
        self._config.interpolation = DEFAULT_RENDER.interpolation
        self._config.output_width = DEFAULT_RENDER.output_width
        self._config.output_height = DEFAULT_RENDER.output_height
        self._config.equalize = DEFAULT_RENDER.equalize
        self._config.threshold = None
        self._projector.threshold = None
        self.settings_changed.emit()
        logging.info("Render settings reset")

    def new_target(self) -> RenderTarget:
        """Allocate a render target at the current output size."""
        return RenderTarget(self._config.output_width, self._config.output_height)

    def render_slice(self, target: RenderTarget, axis: Axis, index: int) -> RenderTarget:
        """Render a slice of the active volume with the current settings."""
        volume = self._require_volume()
        return self._slice_renderer.render(
            volume, target, axis, index,
            self._config.interpolation, self._config.equalize
        )

    def render_projection(self, target: RenderTarget, pitch: float, yaw: float,
                          roll: float) -> RenderTarget:
        """Render a projection of the active volume (angles in radians)."""
        volume = self._require_volume()
        return self._projector.render(
            volume, target, pitch, yaw, roll, self._config.interpolation
        )

    def render_projection_degrees(self, target: RenderTarget, pitch: float, yaw: float,
                                  roll: float) -> RenderTarget:
        """Render a projection with angles given in degrees."""
        return self.render_projection(
            target, math.radians(pitch), math.radians(yaw), math.radians(roll)
        )

    def _require_volume(self) -> VolumeField:
        if self._volume is None:
            raise RuntimeError("No volume loaded")
        return self._volume

    def clear(self) -> None:
        """Clear the active volume."""
        self._volume = None
        self.volume_changed.emit(None)
        logging.info("Volume cleared")
