"""CLI commands."""

from .compress import compress, stats, stages

__all__ = [
    "compress",
    "stats",
    "stages",
]
