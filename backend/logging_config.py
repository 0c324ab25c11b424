"""Process-wide logging setup."""
from __future__ import annotations

import logging

from backend.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=get_settings().log_level, format=LOG_FORMAT)
    return logging.getLogger()
