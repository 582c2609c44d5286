from __future__ import annotations

import numpy as np
import pytest

from sampling.field import VolumeField


@pytest.fixture
def indexed_field() -> VolumeField:
    """4 (height) x 5 (depth) x 6 (width) field where every voxel is unique."""
    return VolumeField(np.arange(4 * 5 * 6).reshape(4, 5, 6))


@pytest.fixture
def random_field() -> VolumeField:
    rng = np.random.default_rng(1234)
    return VolumeField(rng.integers(0, 1000, size=(6, 7, 8)))


@pytest.fixture
def ramp_field() -> VolumeField:
    """Values increase linearly along x: data[z, y, x] == x."""
    ramp = np.broadcast_to(np.arange(8), (3, 4, 8))
    return VolumeField(ramp)
