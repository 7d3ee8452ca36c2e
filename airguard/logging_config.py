"""
Logging configuration for the AirGuard engine.

Library modules only create loggers with logging.getLogger(__name__); they
never install handlers on import. Applications call configure_logging() to
get human-readable lines on stderr:

    [2025-11-24 14:05:09] INFO     | airguard.air_guard_engine | ...
"""

import logging
from typing import Optional, Union

from .settings import Settings

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "airguard-console"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Installs a console handler on the "airguard" logger.

    Calling it again only updates the level; no duplicate handlers are added.

    Args:
        level: Logging level (name or number). Defaults to AIRGUARD_LOG_LEVEL.

    Returns:
        The configured package logger
    """
    if level is None:
        level = Settings.from_env().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("airguard")
    logger.setLevel(level)

    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)

    return logger
