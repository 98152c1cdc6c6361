"""
draft_engine/logger.py
Package logger setup.
"""

import logging
import sys
from draft_engine.constants import LOG_NAME, LOG_FORMAT


def create_logger(level: int = logging.INFO) -> logging.Logger:
    """Returns the package logger, attaching the console handler on first use"""
    logger = logging.getLogger(LOG_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)

    return logger
