from __future__ import annotations

import numpy as np
import pytest

from core.base import BLUE, GREEN, RED, InvalidDimensionsError, Interpolation, RenderTarget


def test_render_target_allocates_bgr_buffer() -> None:
    target = RenderTarget(4, 3)

    assert target.size == (4, 3)
    assert target.pixels.shape == (3, 4, 3)
    assert target.pixels.dtype == np.uint8
    assert len(target.tobytes()) == 4 * 3 * 3


def test_render_target_reports_logical_rgb() -> None:
    target = RenderTarget(2, 1)
    target.pixels[0, 1] = [30, 20, 10]  # blue, green, red

    assert target.pixel(1, 0) == (10, 20, 30)
    assert target.to_rgb()[0, 1].tolist() == [10, 20, 30]


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-4, 4)])
def test_render_target_rejects_non_positive_sizes(size) -> None:
    with pytest.raises(InvalidDimensionsError):
        RenderTarget(*size)


def test_render_target_rejects_mismatched_buffer() -> None:
    with pytest.raises(InvalidDimensionsError):
        RenderTarget(4, 4, np.zeros((4, 5, 3), dtype=np.uint8))


def test_interpolation_labels() -> None:
    assert str(Interpolation.LINEAR) == "Linear"
    assert str(Interpolation.NEAREST_NEIGHBOUR) == "Nearest Neighbour"


def test_render_target_channel_order_matches_buffer() -> None:
    pixels = np.zeros((1, 1, 3), dtype=np.uint8)
    pixels[0, 0, BLUE], pixels[0, 0, GREEN], pixels[0, 0, RED] = 1, 2, 3
    target = RenderTarget(1, 1, pixels)

    assert target.pixel(0, 0) == (3, 2, 1)
