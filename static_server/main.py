"""
Main entrypoint: parse settings, configure logging, run the server on 127.0.0.1.

Usage: static-server --static-dir ./public [--port 3000]
Env: STATIC_DIR, PORT, LOG_LEVEL, LOG_FORMAT, LOG_UTC_OFFSET (see static_server.config).
"""

from __future__ import annotations

import sys
from typing import Sequence

import uvicorn

from static_server.api_server.server import create_app
from static_server.config import ConfigError, get_settings
from static_server.logging import configure_logging, get_logger

logger = get_logger("main")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the server; returns a process exit status."""
    try:
        settings = get_settings(sys.argv[1:] if argv is None else argv)
    except ConfigError as e:
        logger.error("main_config_error", message=str(e))
        return 2

    configure_logging(settings.log_level, settings.log_format, settings.log_utc_offset)
    app = create_app(settings)

    address = f"{settings.host}:{settings.port}"
    logger.debug("listening", message=f"listening on {address}", address=address)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    return 0