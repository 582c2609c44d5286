"""
Loaders Package

Contains data loading strategies for volume file formats.
"""

from .raw_loader import (
    RawVolumeLoader,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_DEPTH,
)

__all__ = [
    'RawVolumeLoader',
    'DEFAULT_WIDTH',
    'DEFAULT_HEIGHT',
    'DEFAULT_DEPTH',
]
