"""API schemas."""

from .requests import (
    CompressOptionsModel,
    CompressRequest,
    StatsRequest,
)
from .responses import (
    CompressResponse,
    StatsResponse,
    StageInfo,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    # Requests
    "CompressOptionsModel",
    "CompressRequest",
    "StatsRequest",
    # Responses
    "CompressResponse",
    "StatsResponse",
    "StageInfo",
    "HealthResponse",
    "ErrorResponse",
]
