"""
Color Mapper

Maps scalar intensities to colours by scaling a base colour with the
value's position inside the field's [min, max] range.
"""

import numpy as np

from core.base import BLUE, GREEN, RED, Color


DEFAULT_BASE_COLOR: Color = (255, 255, 255)


def validate_color(color) -> Color:
    """Check that a colour is three channels in 0-255 and normalise it."""
    if len(color) != 3:
        raise ValueError(f"Colour must have 3 channels, got {color!r}")
    r, g, b = (int(c) for c in color)
    for channel in (r, g, b):
        if channel < 0 or channel > 255:
            raise ValueError(f"Colour channels must be in 0-255, got {color!r}")
    return r, g, b


def _fraction(values, vmin: int, vmax: int) -> np.ndarray:
    # Interpolation can produce values slightly outside the field range
    clamped = np.clip(np.asarray(values, dtype=np.float64), vmin, vmax)
    if vmax == vmin:
        return np.zeros(clamped.shape)
    return (clamped - vmin) / (vmax - vmin)


def color_for(value, vmin: int, vmax: int,
              base_color: Color = DEFAULT_BASE_COLOR) -> Color:
    """
    Map one intensity to an (r, g, b) colour.

    Args:
        value: Scalar intensity
        vmin: Field minimum (maps to black)
        vmax: Field maximum (maps to base_color)
        base_color: (r, g, b) colour at full intensity

    Returns:
        (r, g, b) tuple of ints in 0-255
    """
    fraction = float(_fraction(value, vmin, vmax))
    r, g, b = base_color
    return int(r * fraction), int(g * fraction), int(b * fraction)


def colorize(values, vmin: int, vmax: int,
             base_color: Color = DEFAULT_BASE_COLOR) -> np.ndarray:
    """
    Vectorized colour mapping for a whole image.

    Returns:
        uint8 array of shape values.shape + (3,) in blue, green, red order,
        ready to be written into a RenderTarget.
    """
    fraction = _fraction(values, vmin, vmax)[..., np.newaxis]
    channels = np.zeros(3, dtype=np.float64)
    channels[RED], channels[GREEN], channels[BLUE] = base_color
    return np.trunc(fraction * channels).astype(np.uint8)


class ColorMapper:
    """Colour mapping with a configurable base colour."""

    def __init__(self, base_color: Color = DEFAULT_BASE_COLOR):
        self._base_color = validate_color(base_color)

    @property
    def base_color(self) -> Color:
        return self._base_color

    @base_color.setter
    def base_color(self, color: Color) -> None:
        self._base_color = validate_color(color)

    def color_for(self, value, vmin: int, vmax: int) -> Color:
        return color_for(value, vmin, vmax, self._base_color)

    def colorize(self, values, vmin: int, vmax: int) -> np.ndarray:
        return colorize(values, vmin, vmax, self._base_color)

    def colorize_field(self, values, field) -> np.ndarray:
        """Colour values using the range of a VolumeField."""
        return colorize(values, field.min, field.max, self._base_color)
