"""Utils module."""

import sys

from loguru import logger

from slices.utils.streams import open_input


def configure_logging(level: str = "WARNING") -> None:
    """Send log records at `level` and above to standard error."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> | {name}:{function} - {message}")


__all__ = [
    "configure_logging",
    "open_input",
]
