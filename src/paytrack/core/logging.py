"""Process-wide logging setup."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install the Paytrack log format on the root logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    logging.getLogger("paytrack").setLevel(level)
