"""
Selerara Dashboard API — Request ID Middleware
================================================

What:  Assigns an ID to each request and echoes it in the X-Request-ID header.
Why:   Lets a front-end error report be matched to the server log lines of
       the same request.
How:   Reuses the caller's X-Request-ID when present, otherwise generates a
       short UUID; stores it in a ContextVar read by loggers and handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# ContextVar, not threading.local: concurrent requests share one thread under asyncio
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Stores the request ID in request_id_var and request.state.request_id."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars is plenty for correlation and keeps log lines readable
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
