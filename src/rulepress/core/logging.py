"""Logging setup for the CLI and API entry points."""

import logging
import sys
from typing import Optional

from .config import LoggingSettings, get_settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Configure the ``rulepress`` logger.

    Existing handlers are replaced, so calling this more than once is safe.

    Args:
        settings: Logging settings (default: from ``get_settings()``)

    Returns:
        The configured package logger
    """
    settings = settings or get_settings().logging

    logger = logging.getLogger("rulepress")
    logger.setLevel(settings.level.upper())
    logger.handlers = []

    if settings.format == "rich":
        from rich.logging import RichHandler
        handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging initialized (level=%s, format=%s)", settings.level, settings.format)
    return logger
