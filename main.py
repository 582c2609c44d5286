"""
Volume Viewer

Main entry point for the application.
"""

import argparse
import logging
import sys
from dataclasses import replace

from config import DEFAULT_RENDER, DEFAULT_VOLUME


def setup_logging(level: str = "INFO"):
    """Configure logging to stdout."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(description="View raw 16-bit CT volumes.")
    parser.add_argument("path", nargs="?", default=DEFAULT_VOLUME.path,
                        help="Raw volume file (default: %(default)s)")
    parser.add_argument("--width", type=int, default=DEFAULT_VOLUME.width)
    parser.add_argument("--height", type=int, default=DEFAULT_VOLUME.height)
    parser.add_argument("--depth", type=int, default=DEFAULT_VOLUME.depth)
    parser.add_argument("--no-resize", action="store_true",
                        help="Keep the raw grid instead of resampling to 256^3")
    parser.add_argument("--color", type=int, nargs=3, metavar=("R", "G", "B"),
                        default=list(DEFAULT_RENDER.base_color))
    parser.add_argument("--workers", type=int, default=DEFAULT_RENDER.projector_workers,
                        help="Threads used for projection rendering")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None):
    """Application entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    from PySide6.QtWidgets import QApplication

    from core.data_manager import DataManager
    from gui.main_window import MainWindow
    from gui.style import ViewerStyle

    volume_config = replace(
        DEFAULT_VOLUME,
        path=args.path,
        width=args.width,
        height=args.height,
        depth=args.depth,
        initial_resize=None if args.no_resize else DEFAULT_VOLUME.initial_resize,
    )
    render_config = replace(
        DEFAULT_RENDER,
        base_color=tuple(args.color),
        projector_workers=args.workers,
    )

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Volume Viewer")
    app.setApplicationVersion("1.0")
    ViewerStyle.apply(app)

    data_manager = DataManager(render_config)
    window = MainWindow(volume_config, data_manager)
    window.show()
    window.load_volume(volume_config.path)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
