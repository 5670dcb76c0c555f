"""Request logging middleware."""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request: method, path, status, client address and latency.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            latency_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "Incoming request method=%s path=%s status=%s client_ip=%s latency_ms=%.1f",
                request.method,
                request.url.path,
                status,
                request.client.host if request.client else "-",
                latency_ms,
            )
