"""Process-wide logging setup."""

from __future__ import annotations

import logging
import os


LOG_LEVEL_ENV = "RINGTIMER_LOG_LEVEL"


def setup_logging() -> None:
    log_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Qt's multimedia backend is chatty at DEBUG
    logging.getLogger("PyQt6").setLevel(logging.WARNING)
