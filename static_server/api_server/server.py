"""
FastAPI server — static files under a configured root directory.

Exposes GET /{path} for every path. Settings are passed in once and shared
read-only with every request through app.state.
"""

from __future__ import annotations

from fastapi import FastAPI

from static_server import __version__
from static_server.api_server.middleware import AccessLogMiddleware
from static_server.api_server.static_files import router as static_router
from static_server.config import Settings
from static_server.logging import get_logger

logger = get_logger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build the ASGI app serving settings.static_dir."""
    app = FastAPI(
        title="Static Server",
        description="Serve files from a local directory with structured access logs.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.add_middleware(AccessLogMiddleware)
    app.include_router(static_router)
    logger.debug("app_created", static_dir=str(settings.static_dir))
    return app
