"""
Volume Resizer

Produces a resampled copy of a VolumeField at new dimensions using
trilinear interpolation.
"""

import logging
import time
import numpy as np

from core.base import check_dimensions
from .field import VolumeField
from .resampler import trilinear


class Resizer:
    """
    Resamples a field onto a grid of different dimensions.

    Each target voxel (x, y, z) samples the source at
    (x * width_ratio, y * depth_ratio, z * height_ratio) where each ratio
    is source_dim / target_dim. Work is done one z-plane at a time to keep
    the temporary coordinate arrays small.
    """

    def resize(self, field, target_width: int, target_depth: int,
               target_height: int) -> np.ndarray:
        """
        Resample a field to new dimensions.

        Args:
            field: Source VolumeField (not modified)
            target_width: New number of voxels along x
            target_depth: New number of voxels along y
            target_height: New number of voxels along z

        Returns:
            New (target_height, target_depth, target_width) uint16 grid

        Raises:
            InvalidDimensionsError: If a target dimension is not positive
        """
        check_dimensions(target_width, target_depth, target_height)
        start = time.perf_counter()

        wr = field.width / target_width
        dr = field.depth / target_depth
        hr = field.height / target_height

        xs = np.arange(target_width) * wr
        ys = np.arange(target_depth) * dr
        plane_y, plane_x = np.meshgrid(ys, xs, indexing='ij')

        resized = np.empty((target_height, target_depth, target_width), dtype=np.uint16)
        for z in range(target_height):
            resized[z] = trilinear(field, plane_x, plane_y, z * hr)

        logging.info(
            f"Resized {field.width}x{field.height}x{field.depth} -> "
            f"{target_width}x{target_height}x{target_depth} (WxHxD) "
            f"in {time.perf_counter() - start:.2f}s"
        )
        return resized

    def resize_field(self, field, target_width: int, target_depth: int,
                     target_height: int):
        """Resample a field and wrap the result in a new VolumeField."""
        return VolumeField(self.resize(field, target_width, target_depth, target_height))


_default_resizer = Resizer()
resize = _default_resizer.resize
resize_field = _default_resizer.resize_field
