"""
Per-component logger for levelsmith.

Each generator component gets one of these with its ``verbose`` flag:
warnings and errors always go through, debug and info only when verbose.
Records are forwarded to ``levelsmith.<Component>`` with a
``[levelsmith] [Component]`` prefix.
"""

import logging
from enum import Enum
from typing import Optional

from .logging_config import get_logger


class LogLevel(Enum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


ALWAYS_SHOWN = (LogLevel.WARNING, LogLevel.ERROR)


class LevelsmithLogger:
    """
    Usage:
        logger = LevelsmithLogger(verbose=True, name="LevelAssembler")
        logger.info("Generated level with 4 objectives")
        logger.warning("Placement oracle declined a secret area")
    """

    def __init__(self, verbose: bool = True, name: Optional[str] = None, min_level: LogLevel = LogLevel.INFO):
        """
        Args:
            verbose: Let INFO (and DEBUG, if ``min_level`` allows) through
            name: Component name, used in the prefix and the logger name
            min_level: Lowest level shown while verbose
        """
        self.verbose = verbose
        self.name = name
        self.min_level = min_level
        self._logger = get_logger(name)
        self._prefix = f"[levelsmith] [{name}]" if name else "[levelsmith]"

    def enabled_for(self, level: LogLevel) -> bool:
        if level in ALWAYS_SHOWN:
            return True
        return self.verbose and level.value >= self.min_level.value

    def log(self, message: str, level: LogLevel = LogLevel.INFO):
        if self.enabled_for(level):
            self._logger.log(level.value, f"{self._prefix} {message}")

    def debug(self, message: str):
        self.log(message, LogLevel.DEBUG)

    def info(self, message: str):
        self.log(message, LogLevel.INFO)

    def warning(self, message: str):
        self.log(message, LogLevel.WARNING)

    def error(self, message: str):
        self.log(message, LogLevel.ERROR)


def create_logger(verbose: bool = True, name: Optional[str] = None) -> LevelsmithLogger:
    """
    Build the logger for one component.

    Args:
        verbose: If False, only warnings and errors are emitted
        name: Component name (e.g. "LevelAssembler", "SecretAreas")
    """
    return LevelsmithLogger(verbose=verbose, name=name)
