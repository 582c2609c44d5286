"""
Sampling package for volumetric data.

Contains the voxel field, interpolation, histogram equalization and
resizing algorithms.
"""

from .field import VolumeField
from .equalizer import HistogramEqualizer, compute_table, equalize
from .resampler import nearest, bilinear, trilinear, sample_plane
from .resizer import Resizer, resize, resize_field

__all__ = [
    "VolumeField",
    "HistogramEqualizer",
    "compute_table",
    "equalize",
    "nearest",
    "bilinear",
    "trilinear",
    "sample_plane",
    "Resizer",
    "resize",
    "resize_field",
]
