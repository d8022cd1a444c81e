"""
Logging setup for the text_chunking package.

Every module logs through a child of the "text_chunking" logger obtained
with get_logger(). Handlers are only attached by setup_logging(), which the
runner script calls once at startup; importing the package never configures
logging.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "text_chunking"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach(
    logger: logging.Logger,
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter,
) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Send package log records to stdout and, optionally, to a UTF-8 log file.

    Calling it again replaces the handlers of the previous call.
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    _attach(logger, logging.StreamHandler(sys.stdout), level, formatter)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level, formatter)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger below "text_chunking"; module names already inside it are kept."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
