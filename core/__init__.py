"""
Core Package

Contains the shared data structures, error types and the rendering
session state for the viewer.
"""

from .base import (
    Axis,
    Interpolation,
    RenderTarget,
    BaseLoader,
    VolumeError,
    TruncatedInputError,
    InvalidDimensionsError,
)

__all__ = [
    'Axis',
    'Interpolation',
    'RenderTarget',
    'BaseLoader',
    'VolumeError',
    'TruncatedInputError',
    'InvalidDimensionsError',
]
