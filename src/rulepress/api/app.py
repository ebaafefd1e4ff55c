"""FastAPI application for the RulePress REST API."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import compression_router, health_router
from ..core.config import Settings, get_settings
from ..core.logging import setup_logging

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API app.

    CORS origins and debug mode come from ``settings`` (default:
    ``get_settings()``). Set ``RP_CORS_ORIGINS='[]'`` to disable CORS.
    Logging is left to the caller; ``run_server`` and the CLI configure it.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="RulePress API",
        description="Compression for AI coding assistant rules files",
        version="1.0.0",
        debug=settings.api.debug,
    )

    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.include_router(health_router)
    app.include_router(compression_router, prefix=API_PREFIX)

    logger.debug("API app created (cors=%s)", settings.api.cors_origins)
    return app


app = create_app()


def run_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    reload: bool = False,
    workers: int = 1
) -> None:
    """Serve ``rulepress.api.app:app`` with uvicorn; host and port default to RP_API_HOST / RP_API_PORT."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.logging)
    api_settings = settings.api
    uvicorn.run(
        "rulepress.api.app:app",
        host=host or api_settings.host,
        port=port or api_settings.port,
        reload=reload,
        workers=workers,
    )
