"""Logging helpers for the CLI."""

import logging
import os
from typing import Optional


def _default_level() -> int:
    env_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    return getattr(logging, env_level, logging.WARNING)


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """Get a logger, installing a stderr handler on first use.

    Args:
        name: logger name, defaults to the package logger.
        level: optional string level override (e.g., "DEBUG", "INFO").
    """
    log_level = getattr(logging, level.upper(), _default_level()) if level else _default_level()
    logger = logging.getLogger(name if name else "cdl_fixer")
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    else:
        logging.getLogger().setLevel(log_level)
    return logger
