"""
Request context middleware for structured logging.
"""

from __future__ import annotations

from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from flashdeck.infra.config.logging_config import bind_context, clear_context, get_logger


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request_id, path and method into the structlog context.

    Echoes the request id back in the X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:  # type: ignore[override]
        request_id = request.headers.get("x-request-id") or str(uuid4())

        clear_context()
        bind_context(request_id=request_id, path=request.url.path, method=request.method)
        logger = get_logger("http")

        logger.info("request.start")
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            logger.info("request.end", status_code=response.status_code)
            return response
        finally:
            clear_context()
