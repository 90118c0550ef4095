"""FilterDeck - declarative filter panels demo."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from filterdeck.__version__ import __version__
from filterdeck.ui import theme
from filterdeck.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    """Application entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting FilterDeck %s", __version__)

    app = QApplication(sys.argv)
    app.setStyleSheet(theme.get_stylesheet())

    window = MainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
