"""
Render Target View

pyqtgraph image widget that displays RenderTarget buffers.
"""

from typing import Optional

import pyqtgraph as pg
from PySide6.QtWidgets import QWidget

from core.base import RenderTarget


class RenderTargetView(pg.ImageView):
    """ImageView stripped of its histogram and ROI controls."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.ui.roiBtn.hide()
        self.ui.menuBtn.hide()
        self.ui.histogram.hide()
        self.setMinimumSize(256, 256)

    def show_target(self, target: RenderTarget) -> None:
        """Display a target; pyqtgraph wants RGB indexed [x, y]."""
        rgb = target.to_rgb().transpose(1, 0, 2)
        self.setImage(rgb, autoLevels=False, levels=(0, 255), autoRange=True)
