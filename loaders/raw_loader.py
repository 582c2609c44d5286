"""
Raw Volume Loader

Loads headerless 16-bit little-endian voxel files (such as the classic
CThead data set) into VolumeFields.
"""

from pathlib import Path
import logging
import time

from core.base import BaseLoader, check_dimensions
from sampling.field import VolumeField


# Default dimensions of the CThead data set
DEFAULT_WIDTH = 256
DEFAULT_HEIGHT = 113
DEFAULT_DEPTH = 256


class RawVolumeLoader(BaseLoader):
    """
    Loader for raw voxel files with no header.

    The file holds exactly 2 * width * height * depth bytes ordered
    z (height) slowest, then y (depth), then x (width).

    Attributes:
        width: Voxels along x
        height: Voxels along z
        depth: Voxels along y
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 depth: int = DEFAULT_DEPTH):
        check_dimensions(width, height, depth)
        self.width = width
        self.height = height
        self.depth = depth

    @property
    def expected_bytes(self) -> int:
        """Number of bytes a complete file must contain."""
        return 2 * self.width * self.height * self.depth

    def can_load(self, source: str) -> bool:
        """Check that the file exists and is large enough for the dimensions."""
        path = Path(source)
        return path.is_file() and path.stat().st_size >= self.expected_bytes

    def load(self, source: str) -> VolumeField:
        """
        Load a raw volume file.

        Args:
            source: Path to the raw file

        Returns:
            VolumeField with the loaded samples

        Raises:
            FileNotFoundError: If the file does not exist
            TruncatedInputError: If the file is shorter than expected
        """
        path = Path(source)
        start = time.perf_counter()

        with open(path, 'rb') as f:
            field = VolumeField.load(f.read(), self.width, self.height, self.depth)

        logging.info(
            f"Loaded {path.name}: {self.width}x{self.height}x{self.depth} (WxHxD), "
            f"range [{field.min}, {field.max}] in {time.perf_counter() - start:.2f}s"
        )
        return field
