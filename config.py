"""
Volume Viewer Configuration

Contains constants and default settings for loading and rendering
volume data.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from core.base import Interpolation


# Output resolution bounds accepted by the settings panel
MIN_OUTPUT_SIZE = 16
MAX_OUTPUT_SIZE = 2048


@dataclass
class VolumeConfig:
    """Configuration for raw volume loading."""
    path: str = "CThead"  # Raw 16-bit little-endian file, no header
    width: int = 256  # Voxels along x
    height: int = 113  # Voxels along z (slowest in the file)
    depth: int = 256  # Voxels along y
    # Resample to this (width, depth, height) after loading; None keeps the raw grid
    initial_resize: Optional[Tuple[int, int, int]] = (256, 256, 256)


@dataclass
class RenderConfig:
    """Configuration for slice and projection rendering."""
    interpolation: Interpolation = Interpolation.LINEAR
    output_width: int = 256
    output_height: int = 256
    equalize: bool = False
    threshold: Optional[int] = None  # None = field maximum
    base_color: Tuple[int, int, int] = (255, 255, 255)
    projector_workers: int = 1  # Threads used for projection scanline bands


@dataclass
class GUIConfig:
    """Configuration for GUI appearance."""
    window_title: str = "Volume Data Visualisation"
    title_font_size: int = 40
    angle_range: Tuple[int, int] = (-180, 180)  # Rotation slider range in degrees


# Default configurations
DEFAULT_VOLUME = VolumeConfig()
DEFAULT_RENDER = RenderConfig()
DEFAULT_GUI = GUIConfig()
