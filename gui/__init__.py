"""GUI package for the volume viewer."""

from .panels import SlicePanel, ProjectionPanel, SettingsPanel
from .main_window import MainWindow
from .workers import VolumeLoaderWorker

__all__ = [
    "MainWindow",
    "SlicePanel",
    "ProjectionPanel",
    "SettingsPanel",
    "VolumeLoaderWorker",
]
