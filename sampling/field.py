"""
Volume Field Data Structure

Holds the 3D scalar grid together with the statistics derived from it
(tight min/max bounds and the histogram equalization table).
"""

from typing import Tuple, Union
import logging
import time
import numpy as np

from core.base import (
    Axis,
    InvalidDimensionsError,
    TruncatedInputError,
    check_dimensions,
)
from .equalizer import equalization_table


# Maximum value representable by a voxel sample
MAX_SAMPLE = 65535


class VolumeField:
    """
    Regular 3D grid of 16-bit unsigned samples indexed [z][y][x].

    z runs over the height, y over the depth and x over the width of
    the volume. The grid and its derived min/max/equalization table are
    always replaced together; consumers never observe stale statistics.

    Attributes:
        data: Read-only (height, depth, width) uint16 array
        min: Smallest voxel value
        max: Largest voxel value
        equalization_table: Cumulative histogram remapping, index = value - min
    """

    def __init__(self, grid):
        self._data: np.ndarray = None
        self._min: int = 0
        self._max: int = 0
        self._table: np.ndarray = None
        self.replace(grid)

    @classmethod
    def load(cls, data: Union[bytes, bytearray, memoryview], width: int,
             height: int, depth: int) -> "VolumeField":
        """
        Build a field from a raw little-endian 16-bit voxel stream.

        Voxels are read z (height) slowest, then y (depth), then x (width).
        Each voxel is two bytes (b0, b1) combined as (b1 << 8) | b0.

        Args:
            data: Byte buffer or binary file object
            width: Number of voxels along x
            height: Number of voxels along z
            depth: Number of voxels along y

        Returns:
            New VolumeField

        Raises:
            InvalidDimensionsError: If a dimension is not positive
            TruncatedInputError: If the stream holds fewer bytes than needed
        """
        check_dimensions(width, height, depth)
        count = width * height * depth
        expected = 2 * count

        if hasattr(data, 'read'):
            data = data.read(expected)

        available = len(data)
        if available < expected:
            raise TruncatedInputError(expected, available)
        if available > expected:
            logging.warning(
                f"Ignoring {available - expected} trailing bytes after "
                f"{width}x{height}x{depth} volume"
            )

        voxels = np.frombuffer(data, dtype='<u2', count=count)
        grid = voxels.reshape(height, depth, width).astype(np.uint16)
        return cls(grid)

    def replace(self, new_grid) -> None:
        """
        Install a full replacement grid.

        Width, height and depth are inferred from the (height, depth, width)
        shape; min/max and the equalization table are recomputed before the
        new grid becomes visible.

        Raises:
            InvalidDimensionsError: If the grid is ragged, not 3D or has an
                empty dimension. The field is left unchanged.
            ValueError: If a sample lies outside 0..65535
        """
        start = time.perf_counter()
        grid = self._validate(new_grid)

        vmin = int(grid.min())
        vmax = int(grid.max())
        table = equalization_table(grid, vmin, vmax)
        grid.flags.writeable = False

        self._data, self._min, self._max, self._table = grid, vmin, vmax, table

        height, depth, width = grid.shape
        logging.info(
            f"Volume field set: {width}x{height}x{depth} (WxHxD), "
            f"range [{vmin}, {vmax}] in {time.perf_counter() - start:.2f}s"
        )

    @staticmethod
    def _validate(grid) -> np.ndarray:
        """Convert a candidate grid to a private uint16 array."""
        if isinstance(grid, VolumeField):
            grid = grid.data
        try:
            array = np.array(grid)
        except ValueError as e:
            raise InvalidDimensionsError(f"Grid is not rectangular: {e}") from e

        if array.dtype == object or array.ndim != 3:
            raise InvalidDimensionsError(
                f"Grid must be a rectangular 3D array, got shape {array.shape}"
            )
        if 0 in array.shape:
            raise InvalidDimensionsError(f"Grid has an empty dimension: {array.shape}")
        if array.dtype.kind not in 'biuf':
            raise ValueError(f"Unsupported sample type: {array.dtype}")
        if array.min() < 0 or array.max() > MAX_SAMPLE:
            raise ValueError(f"Samples must lie in [0, {MAX_SAMPLE}]")

        return array.astype(np.uint16)

    def value_at(self, x, y, z, axis: Axis):
        """
        Axis-aware voxel lookup for 2D slice addressing.

        For axis X the (x, y) plane coordinates address (depth, height)
        and z is the width index; for Y they address (width, height) with z
        the depth index; for Z they address (width, depth) with z the
        height index. Accepts ints or integer arrays.
        """
        if axis is Axis.X:
            value = self._data[y, x, z]
        elif axis is Axis.Y:
            value = self._data[y, z, x]
        elif axis is Axis.Z:
            value = self._data[z, y, x]
        else:
            raise AssertionError(f"Invalid axis specified: {axis!r}")

        if np.ndim(value) == 0:
            return int(value)
        return value

    def plane_shape(self, axis: Axis) -> Tuple[int, int]:
        """Get the (columns, rows) of the slice plane for an axis."""
        if axis is Axis.X:
            return self.depth, self.height
        if axis is Axis.Y:
            return self.width, self.height
        if axis is Axis.Z:
            return self.width, self.depth
        raise AssertionError(f"Invalid axis specified: {axis!r}")

    def axis_length(self, axis: Axis) -> int:
        """Get the number of slices available along an axis."""
        if axis is Axis.X:
            return self.width
        if axis is Axis.Y:
            return self.depth
        if axis is Axis.Z:
            return self.height
        raise AssertionError(f"Invalid axis specified: {axis!r}")

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def shape(self) -> Tuple[int, int, int]:
        """Array shape (height, depth, width)."""
        return self._data.shape

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        """Volume size as (width, height, depth)."""
        return self.width, self.height, self.depth

    @property
    def width(self) -> int:
        return self._data.shape[2]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def depth(self) -> int:
        return self._data.shape[1]

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @property
    def equalization_table(self) -> np.ndarray:
        return self._table

    def __repr__(self) -> str:
        return (
            f"VolumeField(width={self.width}, height={self.height}, "
            f"depth={self.depth}, min={self._min}, max={self._max})"
        )
