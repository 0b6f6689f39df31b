"""Logging setup for applications embedding conductor."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from ..config.settings import Settings

_LEVELS = {"debug": "DEBUG", "info": "INFO", "warn": "WARNING", "warning": "WARNING", "error": "ERROR"}


def configure_logging(
    level: str = "INFO",
    rich_output: bool = True,
    log_file: str | None = None,
) -> logging.Logger:
    """Attach handlers to the ``conductor`` logger. Safe to call more than once."""
    log_level = getattr(logging, _LEVELS.get(level.lower(), level.upper()), logging.INFO)
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger("conductor")
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if rich_output:
        handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(log_format))
    handler.setLevel(log_level)
    logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def configure_from_settings(settings: Settings, rich_output: bool = True) -> logging.Logger:
    return configure_logging(settings.logging.level, rich_output=rich_output)
