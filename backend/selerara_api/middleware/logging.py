"""
Selerara Dashboard API — Request Logging Middleware
=====================================================

What:  One access log line per HTTP request.
Why:   Shows which endpoints are slow or failing, correlated by request ID.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client IP. Fields are also attached as `extra` so a
       structured handler can index them.

Level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Health probes (/health, /db-health under any prefix) are not logged: the
load balancer hits them every few seconds.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from selerara_api.middleware.request_id import request_id_var

logger = logging.getLogger("selerara_api.access")

_PROBE_SUFFIXES = ("/health", "/db-health")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status, duration and correlation ID per request.

    Duration covers everything downstream: waiting for a pooled connection,
    the query, grouping and serialization. A request queued behind a full
    pool shows up here as a slow request, not as an error.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path.endswith(_PROBE_SUFFIXES):
            return await call_next(request)

        start_time = time.perf_counter()
        # request.client is None under the ASGI test transport
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
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
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
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
