"""
Pytest fixtures for Static Server tests. Serves a temporary directory.
"""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from static_server.config import Settings
from static_server.logging import configure_logging

INDEX_HTML = b"<h1>hi</h1>"
STYLE_CSS = b"body{}"


@pytest.fixture
def static_root(tmp_path):
    """Root directory with index.html and style.css."""
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "style.css").write_bytes(STYLE_CSS)
    return root


@pytest.fixture
def settings(static_root):
    return Settings.build(static_dir=static_root)


@pytest.fixture
def app(settings):
    from static_server.api_server.server import create_app

    return create_app(settings)


@pytest.fixture
def client(app):
    """FastAPI TestClient over the app serving static_root."""
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def captured_logs():
    """Event dicts logged during the test (DEBUG enabled)."""
    configure_logging(level="DEBUG", fmt="json")
    with capture_logs() as logs:
        yield logs
    configure_logging()

