"""
Package Sorter — Request Logging Middleware
=============================================

What:  One access log line per HTTP request: method, path, query, status,
       duration, request ID and client address.
Why:   Classification requests are cheap and numerous; the access log is
       how operators see what was asked and how it went.
When:  Runs inside RequestIDMiddleware, so the correlation ID is already set.

Log levels by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

What we don't log:
    /health probes (they run every few seconds and drown real traffic)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from package_sorter.middleware.request_id import request_id_var

logger = logging.getLogger("package_sorter.access")

SKIPPED_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with its outcome and duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        query = request.url.query
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s%s %d %.1fms [%s] from %s",
            method,
            path,
            f"?{query}" if query else "",
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
