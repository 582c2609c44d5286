"""
GUI Panels Package

Contains all panel widgets for the application.
"""

from .image_view import RenderTargetView
from .slice_panel import SlicePanel
from .projection_panel import ProjectionPanel
from .settings_panel import SettingsPanel

__all__ = [
    'RenderTargetView',
    'SlicePanel',
    'ProjectionPanel',
    'SettingsPanel',
]
