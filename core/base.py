"""
Core Base Classes

Provides the fundamental data structures, error types and abstract
interfaces shared by the sampling, rendering and loading packages.
"""

from dataclasses import dataclass, field
from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple
import numpy as np


class VolumeError(Exception):
    """Base class for volume loading and rendering errors."""


class TruncatedInputError(VolumeError):
    """The voxel byte stream ended before the expected voxel count."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Voxel stream truncated: expected {expected} bytes, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class InvalidDimensionsError(VolumeError, ValueError):
    """Zero/negative dimensions or a non-rectangular grid."""


class Axis(Enum):
    """Principal axis a slice is taken along."""
    X = "X"
    Y = "Y"
    Z = "Z"


class Interpolation(Enum):
    """Sampling strategy used by the renderers."""
    LINEAR = "Linear"
    NEAREST_NEIGHBOUR = "Nearest Neighbour"

    def __str__(self) -> str:
        return self.value


Color = Tuple[int, int, int]

# Byte offsets of each channel inside a RenderTarget pixel
BLUE, GREEN, RED = 0, 1, 2


def check_dimensions(*dims: int) -> None:
    """Raise InvalidDimensionsError unless every dimension is a positive int."""
    for dim in dims:
        if int(dim) != dim or dim <= 0:
            raise InvalidDimensionsError(f"Dimensions must be positive integers, got {dims}")


@dataclass
class RenderTarget:
    """
    Caller-owned RGB raster the renderers write into.

    Pixels are stored as a (height, width, 3) uint8 array in
    blue, green, red byte order. The renderers never resize or
    reallocate the buffer.

    Attributes:
        width: Output width in pixels
        height: Output height in pixels
        pixels: Backing (height, width, 3) uint8 array
    """
    width: int
    height: int
    pixels: np.ndarray = field(default=None, repr=False)

    def __post_init__(self):
        check_dimensions(self.width, self.height)
        self.width = int(self.width)
        self.height = int(self.height)
        if self.pixels is None:
            self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        elif self.pixels.shape != (self.height, self.width, 3) or self.pixels.dtype != np.uint8:
            raise InvalidDimensionsError(
                f"Pixel buffer {self.pixels.shape}/{self.pixels.dtype} does not "
                f"match {self.width}x{self.height} BGR"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def pixel(self, x: int, y: int) -> Color:
        """Get the logical (r, g, b) colour of one pixel."""
        value = self.pixels[y, x]
        return int(value[RED]), int(value[GREEN]), int(value[BLUE])

    def to_rgb(self) -> np.ndarray:
        """Get an RGB-ordered copy for toolkits that expect RGB."""
        return self.pixels[..., [RED, GREEN, BLUE]]

    def tobytes(self) -> bytes:
        """Get the raw row-major B,G,R raster."""
        return self.pixels.tobytes()


class BaseLoader(ABC):
    """Abstract base class for volume loaders."""

    @abstractmethod
    def load(self, source: str):
        """
        Load a volume from a source.

        Args:
            source: Path to the data source

        Returns:
            VolumeField containing the loaded data
        """
        pass

    def can_load(self, source: str) -> bool:
        """
        Check if this loader can handle the given source.

        Args:
            source: Path to check

        Returns:
            True if this loader can handle the source
        """
        return True
