"""
Blog API Backend: Request ID Middleware
==========================================

What:  Assigns an id to each incoming request and echoes it in the response.
Why:   Lets every log line of one request, and the client's error report, be
       matched up by a single id.
How:   Reads X-Request-ID from the client or generates a short UUID, stores it
       in a ContextVar for loggers and exception handlers, and sets the
       X-Request-ID response header.
Who:   Applied to every request via Starlette middleware.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local id of the request being handled
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that tags each request with a correlation id.

    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate an 8-character UUID prefix
        3. Store in request_id_var and request.state.request_id
        4. Add X-Request-ID to the response
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        return response
