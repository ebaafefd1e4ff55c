"""Health and service info routes."""

import logging

from fastapi import APIRouter

from ..schemas import HealthResponse
from ... import __version__
from ...compression import compress_text
from ...compression.tokenizers import get_tokenizer, SimpleTokenCounter
from ...core.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

_PROBE_TEXT = "Always run the tests before merging"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Compress a probe sentence and load the configured tokenizer.

    ``tokenizer`` is ``estimate`` when counts fall back to ceil(len / 4).
    The service is ``degraded`` only if compression itself fails.
    """
    components = {"compression": "healthy", "tokenizer": "healthy"}

    try:
        compress_text(_PROBE_TEXT)
    except Exception:
        logger.exception("Health probe compression failed")
        components["compression"] = "unavailable"

    try:
        if isinstance(get_tokenizer(get_settings().compression.tokenizer), SimpleTokenCounter):
            components["tokenizer"] = "estimate"
    except Exception:
        logger.exception("Health probe tokenizer failed")
        components["tokenizer"] = "unavailable"

    return HealthResponse(
        status="healthy" if components["compression"] == "healthy" else "degraded",
        version=__version__,
        components=components
    )


@router.get("/")
async def root() -> dict:
    return {
        "name": "RulePress API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "compress": "/api/v1/compress",
            "stats": "/api/v1/compress/stats",
            "stages": "/api/v1/compress/stages",
            "health": "/health",
        },
    }
