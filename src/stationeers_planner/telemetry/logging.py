"""Console logging sink for CLI runs.

Library modules only ever call ``logging.getLogger(...)``; handlers are installed
here, once, by the entry point.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "stationeers_planner"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a rich console handler to the package logger and return it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    logger.propagate = False
    return logger
