"""
Main Window

The main application window for the volume viewer.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QGridLayout, QLabel,
    QFileDialog, QProgressBar, QStatusBar, QMessageBox
)
from PySide6.QtCore import Qt, QThread
from PySide6.QtGui import QAction, QFont

from config import DEFAULT_GUI, DEFAULT_VOLUME, VolumeConfig
from core.base import Axis, VolumeError
from core.data_manager import DataManager
from sampling.field import VolumeField
from .panels import SlicePanel, ProjectionPanel, SettingsPanel
from .workers import VolumeLoaderWorker


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, volume_config: Optional[VolumeConfig] = None,
                 data_manager: Optional[DataManager] = None):
        super().__init__()

        self._volume_config = volume_config or DEFAULT_VOLUME
        self._data_manager = data_manager or DataManager(parent=self)
        self._worker: Optional[QThread] = None

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

    def _setup_ui(self) -> None:
        """Set up the main window UI."""
        self.setWindowTitle(DEFAULT_GUI.window_title)
        self.setMinimumSize(1000, 800)

        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(8, 8, 8, 8)

        title = QLabel(DEFAULT_GUI.window_title)
        title.setFont(QFont(title.font().family(), DEFAULT_GUI.title_font_size, QFont.Bold))
        title.setAlignment(Qt.AlignCenter)
        main_layout.addWidget(title)

        grid = QGridLayout()
        self._slice_panels = {
            axis: SlicePanel(axis, self._data_manager) for axis in Axis
        }
        for column, axis in enumerate(Axis):
            grid.addWidget(self._slice_panels[axis], 0, column)

        self._projection_panel = ProjectionPanel(self._data_manager)
        grid.addWidget(self._projection_panel, 1, 0, 1, 2)

        self._settings_panel = SettingsPanel()
        grid.addWidget(self._settings_panel, 1, 2)

        main_layout.addLayout(grid, stretch=1)

        # Status bar
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

        self._progress_bar = QProgressBar()
        self._progress_bar.setMaximumWidth(200)
        self._progress_bar.setVisible(False)
        self._status_bar.addPermanentWidget(self._progress_bar)

        self._status_bar.showMessage("Ready")

    def _setup_menu(self) -> None:
        """Set up the menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")

        open_action = QAction("Open Raw Volume...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._on_open)
        file_menu.addAction(open_action)

        file_menu.addSeparator()

        exit_action = QAction("Exit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def _connect_signals(self) -> None:
        """Connect widget signals."""
        self._data_manager.volume_changed.connect(self._on_volume_changed)
        self._settings_panel.update_requested.connect(self._on_update)
        self._settings_panel.reset_requested.connect(self._on_reset)

    # ========== Helper Methods ==========

    def _show_error(self, title: str, message: str) -> None:
        """Log an error and show it in a message box."""
        logging.error(f"{title}: {message}")
        self._status_bar.showMessage(f"Error: {title}")
        QMessageBox.critical(self, title, f"An error occurred:\n\n{message}")

    def _redraw_all(self) -> None:
        for panel in self._slice_panels.values():
            panel.redraw()
        self._projection_panel.redraw()

    # ========== Loading ==========

    def load_volume(self, filepath: str) -> None:
        """Load a raw volume in the background."""
        config = self._volume_config
        self._worker = VolumeLoaderWorker(
            filepath,
            (config.width, config.height, config.depth),
            config.initial_resize
        )
        self._worker.progress.connect(self._on_load_progress)
        self._worker.finished.connect(self._on_load_finished)
        self._worker.error.connect(self._on_load_error)

        self._progress_bar.setValue(0)
        self._progress_bar.setVisible(True)
        self._status_bar.showMessage(f"Loading {Path(filepath).name}...")
        self._worker.start()

    def _on_open(self) -> None:
        filepath, _ = QFileDialog.getOpenFileName(
            self, "Open Raw Volume", "", "Raw Volume Files (*)"
        )
        if filepath:
            self.load_volume(filepath)

    def _on_load_progress(self, progress: float) -> None:
        self._progress_bar.setValue(int(progress * 100))

    def _on_load_finished(self, field: VolumeField) -> None:
        self._progress_bar.setVisible(False)
        self._data_manager.set_volume(field)
        self._status_bar.showMessage(
            f"Volume {field.width}x{field.height}x{field.depth}, "
            f"range [{field.min}, {field.max}]"
        )

    def _on_load_error(self, error_msg: str) -> None:
        self._progress_bar.setVisible(False)
        self._show_error("Loading Failed", error_msg)

    # ========== Rendering ==========

    def _on_volume_changed(self, field: Optional[VolumeField]) -> None:
        if field is None:
            return
        self._settings_panel.set_threshold_range(field.min, field.max)
        for panel in self._slice_panels.values():
            panel.set_volume(field)
        self._projection_panel.redraw()

    def _on_update(self) -> None:
        """Apply the settings panel and redraw every view."""
        settings = self._settings_panel
        try:
            self._data_manager.set_output_size(*settings.output_size)
        except (VolumeError, ValueError) as e:
            self._show_error("Invalid Size", str(e))
            return

        self._data_manager.set_interpolation(settings.interpolation)
        self._data_manager.set_equalize(settings.equalize)
        self._data_manager.set_threshold(settings.threshold)

        self._reallocate_and_redraw()

    def _on_reset(self) -> None:
        """Restore default render settings and redraw every view."""
        self._data_manager.reset_settings()
        self._reallocate_and_redraw()

    def _reallocate_and_redraw(self) -> None:
        for panel in self._slice_panels.values():
            panel.reallocate()
        self._projection_panel.reallocate()
        self._redraw_all()
