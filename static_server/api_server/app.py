"""
FastAPI/ASGI application entrypoint.

Build the ASGI app from environment settings (STATIC_DIR, PORT, ...).
Run with: uvicorn static_server.api_server.app:app --host 127.0.0.1 --port 3000
"""

from static_server.api_server.server import create_app
from static_server.config import get_settings

app = create_app(get_settings())

__all__ = ["app"]
