"""
Background Workers

QThread workers for long-running operations (loading and resizing).
"""

import logging
import traceback
from typing import Optional, Tuple

from PySide6.QtCore import QThread, Signal

from loaders import RawVolumeLoader
from sampling.resizer import Resizer


class VolumeLoaderWorker(QThread):
    """Background worker that loads a raw volume and optionally resizes it."""

    progress = Signal(float)
    finished = Signal(object)  # Emits VolumeField
    error = Signal(str)

    def __init__(
        self,
        filepath: str,
        dimensions: Tuple[int, int, int],
        resize_to: Optional[Tuple[int, int, int]] = None
    ):
        """
        Args:
            filepath: Raw volume file
            dimensions: (width, height, depth) of the file
            resize_to: Optional (width, depth, height) to resample to
        """
        super().__init__()
        self.filepath = filepath
        self.dimensions = dimensions
        self.resize_to = resize_to

    def run(self):
        try:
            self.progress.emit(0.0)

            width, height, depth = self.dimensions
            field = RawVolumeLoader(width, height, depth).load(self.filepath)
            self.progress.emit(0.5)

            if self.resize_to is not None:
                field = Resizer().resize_field(field, *self.resize_to)

            self.progress.emit(1.0)
            self.finished.emit(field)

        except Exception as e:
            logging.error(f"Loading error: {e}\n{traceback.format_exc()}")
            self.error.emit(str(e))

