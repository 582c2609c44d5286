from __future__ import annotations

import numpy as np
import pytest

from core.base import Axis, InvalidDimensionsError, Interpolation
from core.data_manager import DataManager
from sampling.field import VolumeField


@pytest.fixture
def manager(random_field: VolumeField) -> DataManager:
    manager = DataManager()
    manager.set_volume(random_field)
    return manager


def test_set_volume_emits_and_resets_threshold(random_field: VolumeField) -> None:
    manager = DataManager()
    received = []
    manager.volume_changed.connect(received.append)

    manager.set_volume(random_field)

    assert received == [random_field]
    assert manager.has_volume
    assert manager.threshold == random_field.max


def test_set_threshold_clamps_into_range(manager: DataManager) -> None:
    volume = manager.volume
    manager.set_threshold(volume.max + 500)
    assert manager.threshold == volume.max

    manager.set_threshold(-10)
    assert manager.threshold == volume.min


def test_output_size_validation(manager: DataManager) -> None:
    with pytest.raises(InvalidDimensionsError):
        manager.set_output_size(0, 64)
    with pytest.raises(ValueError):
        manager.set_output_size(8, 64)
    with pytest.raises(ValueError):
        manager.set_output_size(64, 4096)

    manager.set_output_size(64, 32)
    assert manager.new_target().size == (64, 32)


def test_settings_changed_signal(manager: DataManager) -> None:
    calls = []
    manager.settings_changed.connect(lambda: calls.append(True))

    manager.set_equalize(True)
    manager.set_base_color((0, 255, 50))

    assert len(calls) == 2
    assert manager.config.equalize
    assert manager.config.base_color == (0, 255, 50)


def test_reset_settings_restores_defaults(manager: DataManager) -> None:
    manager.set_output_size(100, 100)
    manager.set_interpolation(Interpolation.NEAREST_NEIGHBOUR)
    manager.set_equalize(True)
    manager.set_threshold(5)
    calls = []
    manager.settings_changed.connect(lambda: calls.append(True))

    manager.reset_settings()

    assert calls == [True]
    assert manager.new_target().size == (256, 256)
    assert manager.config.interpolation is Interpolation.LINEAR
    assert not manager.config.equalize
    assert manager.threshold == manager.volume.max


def test_render_operations_write_targets(manager: DataManager) -> None:
    manager.set_output_size(16, 16)
    slice_target = manager.render_slice(manager.new_target(), Axis.Z, 2)
    projection = manager.render_projection_degrees(manager.new_target(), 10, 20, 30)

    assert slice_target.pixels.any()
    assert projection.pixels.shape == (16, 16, 3)


def test_resize_volume_replaces_field(manager: DataManager) -> None:
    received = []
    manager.volume_changed.connect(received.append)

    resized = manager.resize_volume(10, 10, 10)

    assert manager.volume is resized
    assert resized.dimensions == (10, 10, 10)
    assert received == [resized]


def test_rendering_without_volume_fails() -> None:
    manager = DataManager()
    with pytest.raises(RuntimeError):
        manager.render_slice(manager.new_target(), Axis.X, 0)

    manager.set_volume(VolumeField(np.ones((2, 2, 2))))
    manager.clear()
    assert not manager.has_volume
