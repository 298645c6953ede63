# ./utils/logger.py

import logging
from typing import Optional, Union
from cache_options.settings.logging_settings import LoggingSettings

settings = LoggingSettings()


def _resolve_level(level: Union[str, int]) -> int:
    """
    Map a level name ("debug", "WARNING") or number to a logging level. Unknown names give INFO.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Return the named cache_options logger, attaching its console handler on first use.

    The handler is formatted from `LoggingSettings` (`LOG_FORMAT`, `LOG_DATEFMT`) and the
    logger does not propagate to the root logger, so repeated calls never duplicate output.

    Args:
        name (str): The logger name, usually `__name__`.
        level (Optional[Union[str, int]]): Level for the logger and its handlers. Applied even
            when the logger is already configured. Defaults to `LOG_LEVEL` on first use.

    Returns:
        logging.Logger: The configured logger.

    Usage Example:
    --------------
    logger = setup_logger(__name__)

    logger.debug("Option 'memory_limit' changed to 67108864.")
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=settings.format, datefmt=settings.datefmt))
        logger.addHandler(handler)
        logger.propagate = False
        if level is None:
            level = settings.level

    if level is not None:
        numeric_level = _resolve_level(level)
        logger.setLevel(numeric_level)
        for handler in logger.handlers:
            handler.setLevel(numeric_level)

    return logger
