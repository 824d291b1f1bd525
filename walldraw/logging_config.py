"""Console logging for the walldraw package."""
from __future__ import annotations
import logging
import sys


def setup_logging(level: int | str = logging.INFO) -> None:
    """Send 'walldraw' log records to stdout at the given level."""
    logger = logging.getLogger("walldraw")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # Reloads call this again
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%H:%M:%S",
    ))
    logger.addHandler(handler)
