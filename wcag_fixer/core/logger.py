"""
Logging setup for the fixer.

All components log through children of the "wcag_fixer" logger, e.g.
"wcag_fixer.orchestrator" or "wcag_fixer.fixers.rule_engine". The CLI calls
configure_logging() once; library users may configure logging themselves.
"""

import logging
import sys
from typing import Union

LOGGER_NAME = "wcag_fixer"

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a stdout handler to the package logger.

    Calling it again only updates the level, so handlers are never stacked.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or number

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
