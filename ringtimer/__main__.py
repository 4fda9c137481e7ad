"""Allow running RingTimer as a module: python -m ringtimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .log import setup_logging
from .app import TimerApp, APP_NAME


def main() -> None:
    setup_logging()
    logging.getLogger(__name__).info("%s starting", APP_NAME)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)

    window = TimerApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
