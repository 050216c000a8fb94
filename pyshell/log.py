from __future__ import annotations
import logging
import sys

LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Attach a stderr handler to the package logger. Calling it again only changes the level."""
    logger = logging.getLogger("pyshell")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    try:
        logger.setLevel(level.upper())
    except ValueError:
        logger.setLevel(logging.WARNING)
