from __future__ import annotations

import numpy as np

from sampling.equalizer import HistogramEqualizer, compute_table, equalize
from sampling.field import VolumeField


def test_table_matches_cumulative_histogram() -> None:
    field = VolumeField(np.array([0, 0, 1, 3]).reshape(1, 2, 2))

    # counts [2, 1, 0, 1] -> cumulative [2, 3, 3, 4] -> 3 * c / 4, rounded
    assert compute_table(field).tolist() == [2, 2, 2, 3]


def test_table_is_monotonic_and_within_range(random_field: VolumeField) -> None:
    table = random_field.equalization_table

    assert len(table) == random_field.max - random_field.min + 1
    assert np.all(np.diff(table) >= 0)
    assert table.min() >= random_field.min
    assert table.max() <= random_field.max
    assert table[-1] == random_field.max


def test_uniform_field_has_single_entry_table() -> None:
    field = VolumeField(np.full((4, 4, 4), 100))
    assert HistogramEqualizer().compute_table(field).tolist() == [100]


def test_equalize_clamps_lookup_index() -> None:
    table = np.array([10, 20, 30])

    assert equalize(table, 5, vmin=10) == 10
    assert equalize(table, 11, vmin=10) == 20
    assert equalize(table, 99, vmin=10) == 30
    assert equalize(table, np.array([9, 12, 13]), vmin=10).tolist() == [10, 30, 30]


def test_apply_uses_current_field_table(random_field: VolumeField) -> None:
    equalizer = HistogramEqualizer()
    values = np.array([random_field.min, random_field.max])

    assert equalizer.apply(random_field, values).tolist() == [
        random_field.equalization_table[0],
        random_field.max,
    ]
