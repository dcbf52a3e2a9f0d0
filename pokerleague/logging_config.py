"""Logging setup for the poker league CLI and library."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER = 'pokerleague'

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
# file records keep the source line so scoring warnings can be traced
FILE_FORMAT = '%(asctime)s %(levelname)-7s %(name)s [%(filename)s:%(lineno)d] %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the `pokerleague` logger.

    Console records go to stderr so stdout stays free for tables and
    narratives. When `log_file` is given, records are also appended to
    that file, creating parent directories as needed. Calling this again
    replaces the previous handlers.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger in the `pokerleague` hierarchy."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + '.'):
        name = f'{ROOT_LOGGER}.{name}'
    return logging.getLogger(name)
