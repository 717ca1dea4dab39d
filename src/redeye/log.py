"""Diagnostic output on stderr for the redeye logger tree."""
from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "redeye"
DIAGNOSTIC_FORMAT = "redeye: %(levelname)s: %(message)s"


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> logging.Logger:
    """Send redeye diagnostics to stream (default: current sys.stderr).

    Calling again replaces the previously installed handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(DIAGNOSTIC_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger
