from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import logging
import os
import sys

from rotaryknob.config import DARK_STYLESHEET_PATH

logger = logging.getLogger(__name__)

ORG_ID = "rotaryknob"
APP_ID = "knob-demo"

VISIBLE_APP_NAME = "Rotary Knob"


def load_stylesheet(app: QApplication, path: str = DARK_STYLESHEET_PATH) -> bool:
    """Apply a Qt stylesheet from disk. A missing file leaves the app unstyled."""
    if not os.path.isfile(path):
        logger.warning("Stylesheet not found at %s; continuing without it.", path)
        return False

    with open(path, encoding="utf-8") as fh:
        app.setStyleSheet(fh.read())
    logger.info("Loaded stylesheet %s", path)
    return True


def create_app(stylesheet: str | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance() or QApplication(sys.argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    if stylesheet:
        load_stylesheet(app, stylesheet)

    return app
