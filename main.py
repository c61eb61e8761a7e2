"""ClipTrim — interactive video trimming control."""

import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor

from cliptrim.main_window import MainWindow
from cliptrim.version import __version__

logging.basicConfig(
    level=logging.INFO,
    format="%(name)s | %(levelname)s | %(message)s",
)

_logger = logging.getLogger(__name__)


def _global_exception_handler(exc_type, exc_value, exc_tb):
    """Log unhandled exceptions instead of crashing silently."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return
    _logger.critical("Unhandled exception", exc_info=(exc_type, exc_value, exc_tb))


def main() -> None:
    """Application entry point — optional argv[1] is a video to open."""
    sys.excepthook = _global_exception_handler

    app = QApplication(sys.argv)
    app.setApplicationName("ClipTrim")
    app.setApplicationVersion(__version__)

    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor("#1b1a2e"))
    palette.setColor(QPalette.ColorRole.WindowText, QColor("#e4e4ed"))
    palette.setColor(QPalette.ColorRole.Base, QColor("#131221"))
    palette.setColor(QPalette.ColorRole.Text, QColor("#e4e4ed"))
    palette.setColor(QPalette.ColorRole.Button, QColor("#28263e"))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor("#e4e4ed"))
    palette.setColor(QPalette.ColorRole.Highlight, QColor("#8b5cf6"))
    app.setPalette(palette)

    window = MainWindow()
    window.show()
    if len(sys.argv) > 1:
        window.open_video(sys.argv[1])

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
