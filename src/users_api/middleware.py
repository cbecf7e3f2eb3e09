"""Request logging middleware."""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from users_api.logging import get_logger

REQUEST_ID_HEADER = "x-request-id"
# Probe traffic is logged at DEBUG so it does not drown the access log.
QUIET_PATHS = frozenset({"/health", "/readiness"})

_logger = get_logger("request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each HTTP request with timing and a correlation id."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        start = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
        _logger.log(
            level,
            "request.start id=%s method=%s path=%s",
            request_id,
            request.method,
            request.url.path,
        )
        try:
            response = await call_next(request)
        except Exception:
            _logger.exception(
                "request.error id=%s method=%s path=%s duration_ms=%d",
                request_id,
                request.method,
                request.url.path,
                int((time.perf_counter() - start) * 1000),
            )
            raise

        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        _logger.log(
            level,
            "request.complete id=%s status=%s duration_ms=%d",
            request_id,
            response.status_code,
            int((time.perf_counter() - start) * 1000),
        )
        return response
