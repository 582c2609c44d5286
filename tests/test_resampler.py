from __future__ import annotations

import numpy as np

from core.base import Axis, Interpolation
from sampling.field import VolumeField
from sampling.resampler import bilinear, nearest, sample_plane, trilinear


def test_nearest_truncates_coordinates(indexed_field: VolumeField) -> None:
    assert nearest(indexed_field, 2.9, 1.2, 0, Axis.Z) == indexed_field.data[0, 1, 2]
    assert nearest(indexed_field, 0.99, 3.5, 2, Axis.X) == indexed_field.data[3, 0, 2]


def test_bilinear_on_linear_ramp_truncates(ramp_field: VolumeField) -> None:
    assert bilinear(ramp_field, 2.5, 1.0, 0, Axis.Z) == 2
    assert bilinear(ramp_field, 2.5, 2.25, 1, Axis.Y) == 2
    assert bilinear(ramp_field, 3.75, 0.5, 0, Axis.Z) == 3


def test_bilinear_is_exact_at_grid_points(random_field: VolumeField) -> None:
    data = random_field.data
    for x in range(random_field.width):
        for y in range(random_field.depth):
            assert bilinear(random_field, float(x), float(y), 2, Axis.Z) == data[2, y, x]


def test_bilinear_extrapolates_past_last_sample(ramp_field: VolumeField) -> None:
    # x > width - 1 uses the last cell (6, 7) with a weight above 1
    assert bilinear(ramp_field, 7.5, 0.0, 0, Axis.Z) == 7


def test_bilinear_handles_single_sample_plane_axis() -> None:
    field = VolumeField(np.arange(5).reshape(1, 1, 5))
    assert bilinear(field, 2.0, 0.0, 0, Axis.Z) == 2
    assert bilinear(field, 0.0, 0.0, 0, Axis.Y) == 0


def test_bilinear_vectorized_matches_scalar(random_field: VolumeField) -> None:
    xs = np.array([0.0, 0.3, 2.5, 6.9, 7.4])
    ys = np.array([0.0, 4.1, 1.5, 6.0, 5.5])
    batch = bilinear(random_field, xs, ys, 3, Axis.Z)
    single = [bilinear(random_field, x, y, 3, Axis.Z) for x, y in zip(xs, ys)]

    assert batch.tolist() == single


def test_trilinear_is_exact_at_interior_grid_points(random_field: VolumeField) -> None:
    data = random_field.data
    for z in range(1, random_field.height):
        for y in range(1, random_field.depth):
            for x in range(1, random_field.width):
                assert trilinear(random_field, x, y, z) == data[z, y, x]


def test_trilinear_border_returns_min(random_field: VolumeField) -> None:
    vmin = random_field.min
    assert trilinear(random_field, 0, 3.5, 2.5) == vmin
    assert trilinear(random_field, 3.5, 0.0, 2.5) == vmin
    assert trilinear(random_field, 3.5, 3.5, 0) == vmin
    assert trilinear(random_field, 7.01, 3.5, 2.5) == vmin
    assert trilinear(random_field, 3.5, 6.5, 2.5) == vmin
    assert trilinear(random_field, 3.5, 3.5, 5.5) == vmin


def test_trilinear_blends_midpoints() -> None:
    # Linear in every direction: f = x + 10y + 100z
    z, y, x = np.meshgrid(np.arange(4), np.arange(4), np.arange(4), indexing="ij")
    field = VolumeField(x + 10 * y + 100 * z)

    assert trilinear(field, 1.5, 1.5, 1.5) == int(1.5 + 15 + 150)
    assert trilinear(field, 2.25, 1.0, 2.5) == int(2.25 + 10 + 250)


def test_trilinear_vectorized_matches_scalar(random_field: VolumeField) -> None:
    xs = np.array([0.0, 1.5, 3.25, 7.0, 7.5])
    ys = np.array([2.0, 2.5, 0.5, 6.0, 1.0])
    zs = np.array([1.0, 4.75, 2.0, 5.0, 1.0])
    batch = trilinear(random_field, xs, ys, zs)

    assert batch.tolist() == [trilinear(random_field, *p) for p in zip(xs, ys, zs)]


def test_sample_plane_dispatches_on_mode(ramp_field: VolumeField) -> None:
    assert sample_plane(ramp_field, 2.5, 1.0, 0, Axis.Z, Interpolation.NEAREST_NEIGHBOUR) == 2
    assert sample_plane(ramp_field, 2.75, 1.0, 0, Axis.Z, Interpolation.LINEAR) == 2
