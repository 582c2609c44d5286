"""
Histogram Equalization

Derives a cumulative-histogram intensity remapping that spreads the
voxel value density over the field's own [min, max] range.
"""

import numpy as np


def equalization_table(data: np.ndarray, vmin: int, vmax: int) -> np.ndarray:
    """
    Build the equalization table for a voxel array.

    table[i] = round((max - min) * cumulative_count_i / total + min), where
    index i corresponds to the value min + i. The table keeps the output in
    the original [min, max] range rather than 0-255.

    Args:
        data: Voxel array of any shape
        vmin: Smallest value in data
        vmax: Largest value in data

    Returns:
        int64 array of length (vmax - vmin + 1), non-decreasing
    """
    offsets = data.ravel().astype(np.int64) - vmin
    histogram = np.bincount(offsets, minlength=vmax - vmin + 1)
    cumulative = np.cumsum(histogram)

    # Round half up so the mapping stays monotonic and platform independent
    scaled = (vmax - vmin) * (cumulative / data.size) + vmin
    return np.floor(scaled + 0.5).astype(np.int64)


def equalize(table: np.ndarray, values, vmin: int):
    """
    Remap sampled values through an equalization table.

    Interpolated samples of resized volumes may fall outside the table's
    domain, so the lookup index is clamped to [0, len(table) - 1].
    """
    index = np.clip(np.asarray(values, dtype=np.int64) - vmin, 0, len(table) - 1)
    mapped = table[index]
    if np.ndim(mapped) == 0:
        return int(mapped)
    return mapped


class HistogramEqualizer:
    """Computes and applies equalization tables for a VolumeField."""

    def compute_table(self, field) -> np.ndarray:
        """
        Compute the equalization table of a field.

        Args:
            field: VolumeField to analyse

        Returns:
            Table of length (field.max - field.min + 1)
        """
        return equalization_table(field.data, field.min, field.max)

    def apply(self, field, values):
        """Remap sampled values through the field's current table."""
        return equalize(field.equalization_table, values, field.min)


compute_table = HistogramEqualizer().compute_table
