"""
Logging infrastructure.

Provides logging utilities for the application layer.
"""
import logging
from typing import Optional

from core.settings import get_order_settings


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)
        level: Log level name; defaults to the LOG_LEVEL setting

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level or get_order_settings().log_level)
    elif level:
        logger.setLevel(level)
    return logger
