"""
Logging setup for slidedeck entry points.

Library modules only call logging.getLogger(__name__) under the
'deckcore' namespace; handlers are attached here, once, by the CLI.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_CONSOLE_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)

LOGGER_NAME = 'deckcore'
CONSOLE_HANDLER_NAME = 'deckcore.console'


def _level(value: Union[str, int, None], default: str) -> int:
    if isinstance(value, int):
        return value
    return getattr(logging, (value or default).upper())


def setup_logger(
    name: str = None,
    level: Union[str, int, None] = None,
    log_file: Optional[Union[str, Path]] = None,
    console_level: Union[str, int, None] = None,
) -> logging.Logger:
    """
    Configure a logger with console and rotating file output.

    Usage:
        from config.logging_config import setup_logger
        setup_logger('deckcore', level='DEBUG', log_file='data/logs/slidedeck.log')

    Args:
        name: Logger name. If None, uses 'deckcore'.
        level: Logger level, defaults to LOG_LEVEL.
        log_file: Rotating log file, defaults to LOG_FILE.
        console_level: Console handler level, defaults to INFO.

    Returns:
        The configured logger. A logger that already has handlers only
        gets its logger and console levels updated.
    """
    logger = logging.getLogger(name or LOGGER_NAME)
    logger.setLevel(_level(level, LOG_LEVEL))

    if logger.handlers:
        for handler in logger.handlers:
            if handler.get_name() == CONSOLE_HANDLER_NAME:
                handler.setLevel(_level(console_level, 'INFO'))
        return logger

    # Console: short messages on stderr
    console = logging.StreamHandler()
    console.set_name(CONSOLE_HANDLER_NAME)
    console.setLevel(_level(console_level, 'INFO'))
    console.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))
    logger.addHandler(console)

    # File: everything, with rotation
    log_path = Path(log_file or LOG_FILE)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    return logger
