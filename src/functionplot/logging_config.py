"""
Logging Configuration
Sets up the global logger for the application.
"""
import logging
import os
import sys
from typing import Optional

from functionplot.config import LOG_LEVEL_ENV

_LEVEL_ALIASES = {"1": "DEBUG", "0": "WARNING", "TRUE": "DEBUG", "FALSE": "WARNING"}


def level_from_env(default: int = logging.INFO) -> int:
    """
    Read the logging level from the FUNCTIONPLOT_LOG environment variable.

    Accepts level names (DEBUG, INFO, ...) and the aliases 1/0/true/false.
    Unknown or missing values fall back to ``default``.
    """
    value = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not value:
        return default

    value = _LEVEL_ALIASES.get(value, value)
    level = getattr(logging, value, None)
    if isinstance(level, int):
        return level
    return default


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the root logger for the 'functionplot' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("functionplot")
    logger.setLevel(level)

    # Avoid duplicate logs when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
