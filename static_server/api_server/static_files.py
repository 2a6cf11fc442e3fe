"""
FastAPI router: GET /{path} — serve a file from the static root directory.

Resolution: strip leading "/", empty path -> index.html, join onto the root.
The joined path is canonicalized and must stay inside the root; anything else
is answered like a missing file (404). Content-Type is inferred from the
extension and defaults to text/plain. Files are read in the thread pool so a
slow disk does not stall other requests on the event loop.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from static_server.config import Settings
from static_server.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["static"])

DEFAULT_DOCUMENT = "index.html"
DEFAULT_MIME_TYPE = "text/plain"


# -----------------------------------------------------------------------------
# Path resolution
# -----------------------------------------------------------------------------


def normalize_request_path(path: str) -> str:
    """Strip leading slashes; an empty path means the index document."""
    path = path.lstrip("/")
    return path or DEFAULT_DOCUMENT


def guess_mime_type(path: str | Path) -> str:
    """Best-effort MIME type from the file extension, text/plain when unknown."""
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type or DEFAULT_MIME_TYPE


def resolve_file_path(root: Path, path: str) -> Path | None:
    """
    Join the request path onto root and return the canonical candidate path.

    Returns None when the result would escape root ("..", absolute segments,
    symlinks pointing outside) or cannot be represented on the filesystem.
    The returned path is not checked for existence.
    """
    relative = normalize_request_path(path)
    try:
        base = root.resolve()
        candidate = (base / relative).resolve()
    except (OSError, RuntimeError, ValueError):
        # RuntimeError: symlink loop on Python < 3.13
        return None
    if not candidate.is_relative_to(base):
        return None
    return candidate


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------


def get_app_settings(request: Request) -> Settings:
    """Dependency: the Settings the app was created with (shared, read-only)."""
    return request.app.state.settings


# -----------------------------------------------------------------------------
# Route
# -----------------------------------------------------------------------------


@router.get("/{path:path}")
async def serve_static(path: str, settings: Settings = Depends(get_app_settings)) -> Response:
    """
    Serve the file at path under the static root.

    200 with the file bytes and inferred Content-Type; 404 with an empty body
    when the file is absent; 500 with an empty body when the file exists but
    cannot be read (permissions, removed meanwhile, directory).
    """
    file_path = resolve_file_path(settings.static_dir, path)
    if file_path is None or not file_path.exists():
        return Response(status_code=404)

    mime_type = guess_mime_type(normalize_request_path(path))
    try:
        content = await run_in_threadpool(file_path.read_bytes)
    except OSError as e:
        logger.warning("static_file_read_failed", path=str(file_path), error=str(e))
        return Response(status_code=500)

    # media_type would append "; charset=utf-8" to text/* types
    return Response(content=content, status_code=200, headers={"content-type": mime_type})
