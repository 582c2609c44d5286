from __future__ import annotations

import struct

import numpy as np
import pytest

from core.base import Axis, InvalidDimensionsError, TruncatedInputError
from sampling.field import VolumeField


def _pack(values: list[int]) -> bytes:
    return struct.pack(f"<{len(values)}H", *values)


def test_load_reads_little_endian_in_z_y_x_order() -> None:
    # width=3, height=2, depth=2 -> 12 voxels, x fastest
    values = list(range(100, 112))
    field = VolumeField.load(_pack(values), width=3, height=2, depth=2)

    assert field.dimensions == (3, 2, 2)
    assert field.shape == (2, 2, 3)
    assert field.data[0, 0, 1] == 101
    assert field.data[0, 1, 0] == 103
    assert field.data[1, 0, 0] == 106
    assert field.min == 100
    assert field.max == 111


def test_load_combines_high_byte_without_sign_extension() -> None:
    field = VolumeField.load(bytes([0x34, 0x12, 0xFF, 0xFF]), width=2, height=1, depth=1)

    assert field.data[0, 0, 0] == 0x1234
    assert field.data[0, 0, 1] == 65535
    assert field.max == 65535


def test_load_accepts_file_objects(tmp_path) -> None:
    path = tmp_path / "volume.raw"
    path.write_bytes(_pack([5, 6, 7, 8]))

    with open(path, "rb") as f:
        field = VolumeField.load(f, width=2, height=2, depth=1)

    assert field.data.tolist() == [[[5, 6]], [[7, 8]]]


def test_load_truncated_stream_raises() -> None:
    with pytest.raises(TruncatedInputError) as excinfo:
        VolumeField.load(_pack([1, 2, 3]), width=2, height=2, depth=1)

    assert excinfo.value.expected == 8
    assert excinfo.value.actual == 6


def test_load_ignores_trailing_bytes() -> None:
    field = VolumeField.load(_pack([1, 2, 3]), width=2, height=1, depth=1)
    assert field.data.tolist() == [[[1, 2]]]


@pytest.mark.parametrize("dims", [(0, 1, 1), (1, -2, 1), (1, 1, 0)])
def test_load_rejects_non_positive_dimensions(dims) -> None:
    with pytest.raises(InvalidDimensionsError):
        VolumeField.load(b"", *dims)


def test_replace_recomputes_statistics(indexed_field: VolumeField) -> None:
    indexed_field.replace(np.full((2, 3, 4), 42))

    assert indexed_field.dimensions == (4, 2, 3)
    assert indexed_field.min == 42
    assert indexed_field.max == 42
    assert indexed_field.equalization_table.tolist() == [42]


@pytest.mark.parametrize(
    "grid",
    [
        [[[1, 2], [3]]],  # ragged
        np.zeros((2, 0, 3)),
        np.zeros((4, 4)),
        [],
    ],
)
def test_replace_rejects_invalid_grids(indexed_field: VolumeField, grid) -> None:
    before = indexed_field.data.copy()

    with pytest.raises(InvalidDimensionsError):
        indexed_field.replace(grid)

    np.testing.assert_array_equal(indexed_field.data, before)
    assert indexed_field.max == before.max()


def test_replace_rejects_out_of_range_samples(indexed_field: VolumeField) -> None:
    with pytest.raises(ValueError):
        indexed_field.replace(np.full((1, 1, 2), 70000))
    with pytest.raises(ValueError):
        indexed_field.replace(np.full((1, 1, 2), -1))


def test_data_is_read_only(indexed_field: VolumeField) -> None:
    with pytest.raises(ValueError):
        indexed_field.data[0, 0, 0] = 1


def test_value_at_follows_axis_addressing(indexed_field: VolumeField) -> None:
    data = indexed_field.data

    assert indexed_field.value_at(1, 2, 3, Axis.X) == data[2, 1, 3]
    assert indexed_field.value_at(1, 2, 3, Axis.Y) == data[2, 3, 1]
    assert indexed_field.value_at(1, 2, 3, Axis.Z) == data[3, 2, 1]


def test_value_at_vectorized(indexed_field: VolumeField) -> None:
    xs = np.array([0, 1, 2])
    ys = np.array([1, 1, 1])
    values = indexed_field.value_at(xs, ys, 0, Axis.Z)

    np.testing.assert_array_equal(values, indexed_field.data[0, 1, :3])


def test_invalid_axis_is_a_contract_violation(indexed_field: VolumeField) -> None:
    with pytest.raises(AssertionError):
        indexed_field.value_at(0, 0, 0, "W")
    with pytest.raises(AssertionError):
        indexed_field.plane_shape(None)


def test_plane_shape_and_axis_length(indexed_field: VolumeField) -> None:
    # width=6, height=4, depth=5
    assert indexed_field.plane_shape(Axis.X) == (5, 4)
    assert indexed_field.plane_shape(Axis.Y) == (6, 4)
    assert indexed_field.plane_shape(Axis.Z) == (6, 5)

    assert indexed_field.axis_length(Axis.X) == 6
    assert indexed_field.axis_length(Axis.Y) == 5
    assert indexed_field.axis_length(Axis.Z) == 4
