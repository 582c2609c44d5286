"""
Slice Renderer

Rasterizes axis-aligned slices of a VolumeField into RenderTargets.
"""

from typing import Optional
import logging
import numpy as np

from core.base import Axis, Color, Interpolation, RenderTarget
from sampling.equalizer import equalize as equalize_values
from sampling.resampler import sample_plane
from .colormap import ColorMapper


def plane_coordinates(field, axis: Axis, width: int, height: int):
    """
    Get the scaled plane coordinates for every output pixel.

    Output pixel (px, py) maps to (px * cols / width, py * rows / height)
    where (cols, rows) is the slice plane size for the axis.

    Returns:
        (scaled_x, scaled_y) arrays of shape (height, width)
    """
    cols, rows = field.plane_shape(axis)
    xs = np.arange(width) * (cols / width)
    ys = np.arange(height) * (rows / height)
    scaled_y, scaled_x = np.meshgrid(ys, xs, indexing='ij')
    return scaled_x, scaled_y


class SliceRenderer:
    """
    Renders one axis-aligned slice per call.

    The renderer is stateless apart from its colour mapper; the field is
    passed explicitly so several sessions can share one renderer.
    """

    def __init__(self, color_mapper: Optional[ColorMapper] = None):
        self.color_mapper = color_mapper or ColorMapper()

    def sample_slice(
        self,
        field,
        axis: Axis,
        slice_index: int,
        width: int,
        height: int,
        mode: Interpolation = Interpolation.LINEAR,
        equalize: bool = False
    ) -> np.ndarray:
        """
        Sample a slice at an output resolution without colouring it.

        Returns:
            (height, width) int64 array of sampled (and optionally
            equalized) intensities
        """
        count = field.axis_length(axis)
        if slice_index < 0 or slice_index >= count:
            raise IndexError(
                f"Slice {slice_index} out of range for axis {axis.value} (0-{count - 1})"
            )

        scaled_x, scaled_y = plane_coordinates(field, axis, width, height)
        values = sample_plane(field, scaled_x, scaled_y, slice_index, axis, mode)

        if equalize:
            values = equalize_values(field.equalization_table, values, field.min)
        return values

    def render(
        self,
        field,
        target: RenderTarget,
        axis: Axis,
        slice_index: int,
        mode: Interpolation = Interpolation.LINEAR,
        equalize: bool = False
    ) -> RenderTarget:
        """
        Render a slice into a target.

        Args:
            field: VolumeField to sample
            target: Caller-owned output buffer, written in place
            axis: Axis the slice is taken along
            slice_index: Index of the slice along the axis
            mode: Interpolation strategy
            equalize: Remap values through the field's equalization table

        Returns:
            The same target, for chaining

        Raises:
            IndexError: If slice_index is outside the axis
        """
        values = self.sample_slice(
            field, axis, slice_index, target.width, target.height, mode, equalize
        )
        target.pixels[...] = self.color_mapper.colorize_field(values, field)

        logging.debug(
            f"Rendered {axis.value} slice {slice_index} at "
            f"{target.width}x{target.height} ({mode}, equalize={equalize})"
        )
        return target


def render_slice(
    field,
    target: RenderTarget,
    axis: Axis,
    slice_index: int,
    mode: Interpolation = Interpolation.LINEAR,
    equalize: bool = False,
    base_color: Optional[Color] = None
) -> RenderTarget:
    """Render a slice with a one-off renderer (see SliceRenderer.render)."""
    mapper = ColorMapper(base_color) if base_color is not None else ColorMapper()
    return SliceRenderer(mapper).render(field, target, axis, slice_index, mode, equalize)
