"""Centralized logging configuration.

Django and its dependencies log through the standard library; those records
are forwarded to loguru so there is a single sink configuration.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

log_format = " | ".join(
    (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green>",
        "<level>{level:<8}</level>",
        "<cyan>{name}:{function}:{line}</cyan>",
        "{message}",
    )
)


class InterceptHandler(logging.Handler):
    """Route standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format=log_format)
    if log_file is not None:
        logger.add(
            log_file,
            level=level,
            format=log_format,
            rotation="1 day",
            retention="30 days",
            compression="zip",
            enqueue=True,
        )
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
