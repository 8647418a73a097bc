"""Logging configuration for study-map."""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru with appropriate level.

    The viewer owns the terminal, so it passes a ``log_file`` and nothing is written to
    stderr. Headless commands log to stderr.
    """
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    if log_file is None:
        logger.add(sys.stderr, level=level, format="{level.icon} {message}")
    else:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <8} {message}",
            rotation="1 MB",
            retention=3,
        )
