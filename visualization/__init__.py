"""
Visualization Package

Framework-agnostic rendering of volume slices and projections into
RenderTarget pixel buffers.
"""

from .colormap import ColorMapper, color_for, colorize, DEFAULT_BASE_COLOR
from .slice_renderer import SliceRenderer, render_slice
from .projector import Projector, render_projection, rotation_matrix

__all__ = [
    'ColorMapper',
    'color_for',
    'colorize',
    'DEFAULT_BASE_COLOR',
    'SliceRenderer',
    'render_slice',
    'Projector',
    'render_projection',
    'rotation_matrix',
]
