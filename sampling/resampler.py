"""
Resampler

Maps continuous grid coordinates to scalar values using nearest
neighbour, bilinear (2D, within a slice plane) or trilinear (3D)
interpolation. Every function accepts scalar coordinates (returning an
int) or numpy arrays of coordinates (returning an int64 array).
"""

from typing import Tuple
import numpy as np

from core.base import Axis, Interpolation


def _is_scalar(*coords) -> bool:
    return all(np.ndim(c) == 0 for c in coords)


def _finish(values: np.ndarray, scalar: bool):
    """Truncate interpolated values toward zero into the integer domain."""
    result = np.trunc(values).astype(np.int64)
    if scalar:
        return int(result)
    return result


def _to_index(coord):
    if np.ndim(coord) == 0:
        return int(coord)
    return np.asarray(coord).astype(np.int64)


def nearest(field, x, y, slice_index: int, axis: Axis):
    """
    Nearest neighbour sample within a slice plane.

    Coordinates are truncated to integers and looked up with
    VolumeField.value_at.
    """
    value = field.value_at(_to_index(x), _to_index(y), slice_index, axis)
    if np.ndim(value) == 0:
        return int(value)
    return value.astype(np.int64)


def _plane_cell(coord: np.ndarray, limit: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Get the enclosing integer cell along one plane coordinate.

    The upper bound is forced to 1 at the lower boundary, clamped to
    limit - 1 past the last sample and the ceiling otherwise; the lower
    bound is one less. Returns (lower, upper, weight of upper).
    """
    if limit == 1:
        zeros = np.zeros(coord.shape, dtype=np.int64)
        return zeros, zeros, np.zeros(coord.shape)

    upper = np.where(coord == 0, 1.0, np.where(coord > limit - 1, limit - 1, np.ceil(coord)))
    lower = upper - 1
    weight = coord - lower
    return lower.astype(np.int64), upper.astype(np.int64), weight


def bilinear(field, x, y, slice_index: int, axis: Axis):
    """
    Bilinear sample within the slice plane selected by axis.

    The plane is (depth, height) for X, (width, height) for Y and
    (width, depth) for Z. Coordinates past the last sample are blended
    from the last cell, so the weights may extrapolate.
    """
    scalar = _is_scalar(x, y)
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    x, y = np.broadcast_arrays(x, y)

    max_x, max_y = field.plane_shape(axis)
    x1, x2, tx = _plane_cell(x, max_x)
    y1, y2, ty = _plane_cell(y, max_y)

    x1y1 = np.asarray(field.value_at(x1, y1, slice_index, axis), dtype=np.float64)
    x2y1 = np.asarray(field.value_at(x2, y1, slice_index, axis), dtype=np.float64)
    x1y2 = np.asarray(field.value_at(x1, y2, slice_index, axis), dtype=np.float64)
    x2y2 = np.asarray(field.value_at(x2, y2, slice_index, axis), dtype=np.float64)

    first_row = (1 - tx) * x1y1 + tx * x2y1
    second_row = (1 - tx) * x1y2 + tx * x2y2
    return _finish((1 - ty) * first_row + ty * second_row, scalar)


def trilinear(field, x, y, z):
    """
    Trilinear sample in volume space (x along width, y along depth,
    z along height).

    Coordinates that are exactly 0 (or negative) or beyond dimension - 1
    return field.min instead of being interpolated; border voxels are
    treated as background.
    """
    scalar = _is_scalar(x, y, z)
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=np.float64),
        np.asarray(y, dtype=np.float64),
        np.asarray(z, dtype=np.float64),
    )
    width, height, depth = field.dimensions
    border = (
        (x <= 0) | (y <= 0) | (z <= 0) |
        (x > width - 1) | (y > depth - 1) | (z > height - 1)
    )

    # Park border coordinates on a valid cell; their result is replaced below
    x = np.where(border, 1.0, x)
    y = np.where(border, 1.0, y)
    z = np.where(border, 1.0, z)

    x2 = np.ceil(x)
    y2 = np.ceil(y)
    z2 = np.ceil(z)
    x1 = x2 - 1
    y1 = y2 - 1
    z1 = z2 - 1

    tx = x - x1
    ty = y - y1
    tz = z - z1

    x1, x2 = x1.astype(np.int64), x2.astype(np.int64)
    y1, y2 = y1.astype(np.int64), y2.astype(np.int64)
    z1, z2 = z1.astype(np.int64), z2.astype(np.int64)

    data = field.data
    if border.all():
        values = np.zeros(x.shape)
    else:
        c00 = data[z1, y1, x1] * (1 - tx) + data[z1, y1, x2] * tx
        c10 = data[z1, y2, x1] * (1 - tx) + data[z1, y2, x2] * tx
        c01 = data[z2, y1, x1] * (1 - tx) + data[z2, y1, x2] * tx
        c11 = data[z2, y2, x1] * (1 - tx) + data[z2, y2, x2] * tx

        c0 = c00 * (1 - ty) + c10 * ty
        c1 = c01 * (1 - ty) + c11 * ty
        values = c0 * (1 - tz) + c1 * tz

    values = np.where(border, field.min, values)
    return _finish(values, scalar)


def sample_plane(field, x, y, slice_index: int, axis: Axis, mode: Interpolation):
    """Sample a slice plane with the strategy selected by mode."""
    if mode is Interpolation.LINEAR:
        return bilinear(field, x, y, slice_index, axis)
    if mode is Interpolation.NEAREST_NEIGHBOUR:
        return nearest(field, x, y, slice_index, axis)
    raise AssertionError(f"Invalid interpolation mode: {mode!r}")
