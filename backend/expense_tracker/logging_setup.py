"""Logging configuration for the ``expense_tracker`` package.

Library modules only call ``logging.getLogger(__name__)``; entrypoints (the
FastAPI app and the CLI) call :func:`configure_logging` once at startup to
attach a single handler to the package logger.
"""

import logging
import sys
from typing import Union

_PKG_LOGGER_NAME = "expense_tracker"
_CONFIGURED = False

logging.getLogger(_PKG_LOGGER_NAME).addHandler(logging.NullHandler())


def _parse_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    level = level.strip().upper()
    if level.isdigit():
        return int(level)
    numeric = getattr(logging, level, None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO


def configure_logging(level: Union[int, str] = "INFO") -> None:
    """Attach a StreamHandler to the package logger, once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    )
    logger.setLevel(_parse_level(level))
    logger.addHandler(handler)
    # Avoid double emission via the root logger
    logger.propagate = False

    _CONFIGURED = True
