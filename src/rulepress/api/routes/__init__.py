"""API routes."""

from .compression import router as compression_router
from .health import router as health_router

__all__ = [
    "compression_router",
    "health_router",
]
