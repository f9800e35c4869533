"""
Logging setup for levelsmith.

Every component logs to a child of the ``levelsmith`` logger, so a host game
can mute, raise or redirect all generator output through that one name.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LEVELSMITH_LOGGER_NAME = "levelsmith"
DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def setup_logger(
    name: str = LEVELSMITH_LOGGER_NAME,
    level: int = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    console: bool = True,
) -> logging.Logger:
    """
    (Re)configure the levelsmith logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        name: Logger to configure (default: 'levelsmith')
        level: Threshold for the logger and its handlers
        log_file: Also append records to this file, creating parent folders
        console: Echo records to stdout

    Returns:
        The configured logger

    Examples:
        >>> import logging
        >>> logger = setup_logger(level=logging.DEBUG, log_file="logs/levelgen.log")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    if console:
        logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level))

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_make_handler(logging.FileHandler(log_file, mode="a"), level))

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return ``levelsmith.<name>``, or the ``levelsmith`` logger itself.

    The first call sets up a console handler on ``levelsmith`` unless the host
    already configured it.
    """
    if not logging.getLogger(LEVELSMITH_LOGGER_NAME).handlers:
        setup_logger()
    return logging.getLogger(f"{LEVELSMITH_LOGGER_NAME}.{name}" if name else LEVELSMITH_LOGGER_NAME)
