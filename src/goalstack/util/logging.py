"""Logging helpers."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    return logger


def configure_level(level: str | int, name: str = "goalstack") -> None:
    """Set ``level`` on the package logger and every configured child logger."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logging.getLogger(name).setLevel(level)
    for logger_name, logger in logging.Logger.manager.loggerDict.items():
        if logger_name.startswith(f"{name}.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
