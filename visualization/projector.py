"""
Projector

Threshold-limited maximum intensity projection (MIP) of a VolumeField
viewed through an arbitrary 3D rotation.
"""

from typing import Optional, Tuple
import concurrent.futures
import logging
import time
import numpy as np

from core.base import Color, Interpolation, RenderTarget
from sampling.resampler import trilinear
from .colormap import ColorMapper


# Upper bound on samples held in memory per scanline band
BAND_SAMPLE_BUDGET = 2_000_000


def rotation_matrix(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """
    Compose the 3x3 rotation P @ Q @ R.

    P, Q and R are the right-handed rotations about the X, Y and Z axes
    by pitch, yaw and roll (radians).
    """
    cp, sp = np.cos(pitch), np.sin(pitch)
    cq, sq = np.cos(yaw), np.sin(yaw)
    cr, sr = np.cos(roll), np.sin(roll)

    p = np.array([[1, 0, 0],
                  [0, cp, -sp],
                  [0, sp, cp]])
    q = np.array([[cq, 0, sq],
                  [0, 1, 0],
                  [-sq, 0, cq]])
    r = np.array([[cr, -sr, 0],
                  [sr, cr, 0],
                  [0, 0, 1]])
    return p @ q @ r


def first_above_or_max(samples: np.ndarray, threshold: float) -> np.ndarray:
    """
    Reduce rays of samples (last axis) to their projected value.

    The sweep keeps a running maximum and stops at the first sample that
    exceeds the threshold, so that sample is the result; rays that never
    cross the threshold yield their full maximum. Higher values further
    along a ray are never seen once the threshold is crossed.
    """
    above = samples > threshold
    crossed = above.any(axis=-1)
    first = above.argmax(axis=-1)
    first_value = np.take_along_axis(samples, first[..., np.newaxis], axis=-1)[..., 0]
    return np.where(crossed, first_value, samples.max(axis=-1))


class Projector:
    """
    Renders rotated maximum intensity projections.

    Each output pixel (py, pz) casts a ray along the volume's X extent
    (x from -width/2 to width/2). Points are rotated about the volume
    centre and sampled; points outside the grid count as the field
    minimum. Rows are processed in bands which can be spread over a
    thread pool; the output does not depend on the worker count.

    Attributes:
        color_mapper: Maps projected intensities to colours
        workers: Number of threads used for scanline bands (1 = inline)
    """

    def __init__(
        self,
        color_mapper: Optional[ColorMapper] = None,
        threshold: Optional[int] = None,
        workers: int = 1
    ):
        self.color_mapper = color_mapper or ColorMapper()
        self._threshold = threshold
        self.workers = max(1, int(workers))

    @property
    def threshold(self) -> Optional[int]:
        """Projection threshold; None means the field maximum."""
        return self._threshold

    @threshold.setter
    def threshold(self, value: Optional[int]) -> None:
        self._threshold = None if value is None else int(value)

    def effective_threshold(self, field) -> int:
        return field.max if self._threshold is None else self._threshold

    def _project_rows(
        self,
        field,
        matrix: np.ndarray,
        rows: np.ndarray,
        width: int,
        ratios: Tuple[float, float],
        direct: bool,
        threshold: int
    ) -> np.ndarray:
        """Project a band of output rows; returns (len(rows), width) maxima."""
        dim_x, dim_z, dim_y = field.dimensions
        half_x, half_y, half_z = dim_x // 2, dim_y // 2, dim_z // 2
        wr, hr = ratios

        steps = np.arange(-half_x, half_x, dtype=np.float64)
        if steps.size == 0:
            return np.full((len(rows), width), field.min, dtype=np.int64)

        ray = steps[np.newaxis, np.newaxis, :]
        scaled_y = (np.arange(width) * wr - half_y)[np.newaxis, :, np.newaxis]
        scaled_z = (rows * hr - half_z)[:, np.newaxis, np.newaxis]

        new_x = matrix[0, 0] * ray + matrix[0, 1] * scaled_y + matrix[0, 2] * scaled_z + half_x
        new_y = matrix[1, 0] * ray + matrix[1, 1] * scaled_y + matrix[1, 2] * scaled_z + half_y
        new_z = matrix[2, 0] * ray + matrix[2, 1] * scaled_y + matrix[2, 2] * scaled_z + half_z

        inside = (
            (new_x >= 0) & (new_y >= 0) & (new_z >= 0) &
            (new_x < dim_x) & (new_y < dim_y) & (new_z < dim_z)
        )

        samples = np.full(inside.shape, field.min, dtype=np.int64)
        if inside.any():
            px, py, pz = new_x[inside], new_y[inside], new_z[inside]
            if direct:
                samples[inside] = field.data[
                    pz.astype(np.int64), py.astype(np.int64), px.astype(np.int64)
                ]
            else:
                samples[inside] = trilinear(field, px, py, pz)

        return first_above_or_max(samples, threshold)

    def project(
        self,
        field,
        width: int,
        height: int,
        pitch: float = 0.0,
        yaw: float = 0.0,
        roll: float = 0.0,
        mode: Interpolation = Interpolation.LINEAR
    ) -> np.ndarray:
        """
        Compute projected intensities without colouring them.

        Nearest neighbour lookup is used when mode asks for it or when the
        output resolution matches the volume 1:1 (width == depth and
        height == height of the volume).

        Returns:
            (height, width) int64 array of projected intensities
        """
        matrix = rotation_matrix(pitch, yaw, roll)
        wr = field.depth / width
        hr = field.height / height
        direct = mode is Interpolation.NEAREST_NEIGHBOUR or (wr == 1 and hr == 1)
        threshold = self.effective_threshold(field)

        steps = max(1, 2 * (field.width // 2))
        band = max(1, BAND_SAMPLE_BUDGET // (width * steps))
        bands = [np.arange(start, min(start + band, height)) for start in range(0, height, band)]

        result = np.empty((height, width), dtype=np.int64)

        def project_band(rows):
            return rows, self._project_rows(field, matrix, rows, width, (wr, hr), direct, threshold)

        if self.workers > 1 and len(bands) > 1:
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = [executor.submit(project_band, rows) for rows in bands]
                for future in concurrent.futures.as_completed(futures):
                    rows, values = future.result()
                    result[rows[0]:rows[-1] + 1] = values
        else:
            for rows in bands:
                _, values = project_band(rows)
                result[rows[0]:rows[-1] + 1] = values

        return result

    def render(
        self,
        field,
        target: RenderTarget,
        pitch: float = 0.0,
        yaw: float = 0.0,
        roll: float = 0.0,
        mode: Interpolation = Interpolation.LINEAR
    ) -> RenderTarget:
        """
        Render a rotated projection into a target.

        Args:
            field: VolumeField to project
            target: Caller-owned output buffer, written in place
            pitch: Rotation about X in radians
            yaw: Rotation about Y in radians
            roll: Rotation about Z in radians
            mode: Interpolation strategy

        Returns:
            The same target, for chaining
        """
        start = time.perf_counter()
        values = self.project(field, target.width, target.height, pitch, yaw, roll, mode)
        target.pixels[...] = self.color_mapper.colorize_field(values, field)

        logging.info(
            f"Projection {target.width}x{target.height} "
            f"(pitch={pitch:.2f}, yaw={yaw:.2f}, roll={roll:.2f}, {mode}) "
            f"took {(time.perf_counter() - start) * 1000:.0f} ms"
        )
        return target


def render_projection(
    field,
    target: RenderTarget,
    pitch: float = 0.0,
    yaw: float = 0.0,
    roll: float = 0.0,
    mode: Interpolation = Interpolation.LINEAR,
    threshold: Optional[int] = None,
    base_color: Optional[Color] = None
) -> RenderTarget:
    """Render a projection with a one-off projector (see Projector.render)."""
    mapper = ColorMapper(base_color) if base_color is not None else ColorMapper()
    return Projector(mapper, threshold).render(field, target, pitch, yaw, roll, mode)
