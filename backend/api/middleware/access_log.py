"""
Request access logging.

Writes one line per request: client, method, path with query, status,
latency and user agent.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("api.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log every request after the response is produced."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        client = request.client.host if request.client else "-"

        logger.info(
            f"[{client}] {request.method} {path} {response.status_code} "
            f"{latency_ms:.1f}ms {request.headers.get('user-agent', '-')}"
        )
        return response
