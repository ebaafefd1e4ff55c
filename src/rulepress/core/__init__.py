"""Core module - types, configuration, logging and exceptions."""

from .types import (
    CompressionOptions,
    CompressionReport,
    StemmerType,
)
from .config import Settings, get_settings, reload_settings
from .logging import setup_logging
from .exceptions import (
    RulePressError,
    CompressionError,
    ConfigurationError,
    TokenizerError,
)

__all__ = [
    # Types
    "CompressionOptions",
    "CompressionReport",
    "StemmerType",
    # Configuration
    "Settings",
    "get_settings",
    "reload_settings",
    "setup_logging",
    # Exceptions
    "RulePressError",
    "CompressionError",
    "ConfigurationError",
    "TokenizerError",
]
