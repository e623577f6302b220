"""
Structured request logging middleware.

Every request/response cycle is logged as a single ``http_request`` event
with method, path, status code, duration and a unique request id that is
echoed back in the ``X-Request-ID`` header.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger: structlog.stdlib.BoundLogger = structlog.get_logger("app_links.request")


def _level_for(status_code: int) -> str:
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    return "info"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every HTTP request/response with structured fields.

    Captured fields:
        - ``request_id``  -- unique UUID for the request
        - ``method``      -- HTTP method
        - ``path``        -- request path
        - ``query``       -- raw query string, if any
        - ``status_code`` -- response status
        - ``duration_ms`` -- wall-clock duration in milliseconds
        - ``client_ip``   -- client IP address
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            self._log_request(request, 500, start)
            raise
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers["X-Request-ID"] = request_id
        self._log_request(request, response.status_code, start)
        return response

    @staticmethod
    def _log_request(request: Request, status_code: int, start: float) -> None:
        event_data: dict[str, Any] = {
            "request_id": request.state.request_id,
            "method": request.method,
            "path": str(request.url.path),
            "query": str(request.url.query) if request.url.query else None,
            "status_code": status_code,
            "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            "client_ip": request.client.host if request.client else None,
        }
        log_method = getattr(logger, _level_for(status_code), logger.info)
        log_method("http_request", **event_data)
