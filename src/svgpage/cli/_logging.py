"""Logging setup for the ``svgpage`` command."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "info") -> None:
    """Send ``svgpage.*`` records to stderr at *level*.

    Unknown level names fall back to INFO.
    """
    root = logging.getLogger("svgpage")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
