"""
HTTP middleware — access logging.

Responsibilities:
- Drain the request body for the access record, then replay it so the
  downstream handler reads the identical bytes.
- Record method, URI, decoded body and the final status code.
- Emit exactly one structured record per request, after the status is known.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from static_server.logging import get_logger

logger = get_logger(__name__)

ACCESS_LOG_EVENT = "access_log"


class AccessLog(BaseModel):
    """One record per request; status_code is filled in once the response exists."""

    uri: str = Field(..., description="Request target as received (path and query)")
    method: str = Field(..., description="HTTP method")
    req_body: str = Field("", description="Request body, UTF-8 decoded")
    status_code: int = Field(200, ge=0, le=65535, description="Response status code")


def request_uri(request: Request) -> str:
    """Path and query string as sent by the client (not percent-decoded)."""
    raw_path = request.scope.get("raw_path")
    path = raw_path.split(b"?", 1)[0].decode("latin-1") if raw_path else request.url.path
    query = request.scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path


def emit_access_log(access_log: AccessLog) -> None:
    logger.debug(ACCESS_LOG_EVENT, **access_log.model_dump())


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log uri, method, request body and status code of every request at DEBUG."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        body = await request.body()
        uri = request_uri(request)
        try:
            req_body = body.decode("utf-8")
        except UnicodeDecodeError:
            emit_access_log(
                AccessLog(
                    uri=uri,
                    method=request.method,
                    req_body=body.decode("utf-8", errors="replace"),
                    status_code=400,
                )
            )
            return Response(status_code=400)

        access_log = AccessLog(uri=uri, method=request.method, req_body=req_body)
        # request.body() is cached on the request and replayed to the handler by call_next
        try:
            response = await call_next(request)
        except Exception:
            access_log.status_code = 500
            emit_access_log(access_log)
            raise
        access_log.status_code = response.status_code
        emit_access_log(access_log)
        return response
