"""Request logging and OPTIONS handling middleware."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request together with its status and latency."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        method = request.method
        path = request.url.path
        logger.info("Request: %s %s", method, path)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "Request failed: %s %s after %.2fms", method, path, duration_ms
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Response: %s %s %d %.2fms",
            method,
            path,
            response.status_code,
            duration_ms,
        )
        return response


class OptionsShortCircuitMiddleware(BaseHTTPMiddleware):
    """Answer ``OPTIONS`` requests without reaching a route.

    Full CORS pre-flights are already answered by the CORS middleware wrapped
    around this one; every other ``OPTIONS`` request ends here with 204.
    """

    def __init__(self, app: ASGIApp, *, allow_methods: Sequence[str]) -> None:
        super().__init__(app)
        self._allow = ", ".join(sorted({*allow_methods, "OPTIONS"}))

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        if request.method != "OPTIONS":
            return await call_next(request)
        return Response(
            status_code=204,
            headers={
                "Allow": self._allow,
                "Access-Control-Allow-Methods": self._allow,
            },
        )
