"""
Request context middleware.

WHAT: Middleware that gives every request an ID, makes it available for the
rest of the request, and logs the request once it completes.

WHY: Service log lines are only useful if they can be tied back to the
request that produced them. The request ID is echoed in the
``X-Request-ID`` response header so clients can quote it.

HOW: Stores context in both request.state (for handlers) and a ContextVar
(for services/DAOs without the request object).
"""

import logging
import time
import uuid
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@dataclass(frozen=True)
class RequestContext:
    """
    Container for request-scoped context data.

    Fields:
    - request_id: Identifier for log correlation
    - path: Request path
    - method: HTTP method (GET, POST, etc.)
    """

    request_id: str
    path: str
    method: str


# WHY: ContextVar ensures each async request gets its own isolated context
_request_context: ContextVar[Optional[RequestContext]] = ContextVar(
    "request_context", default=None
)


def get_request_context() -> Optional[RequestContext]:
    """
    Get the current request context.

    Returns:
        RequestContext if within a request, None otherwise
    """
    return _request_context.get()


def get_request_id(request: Request) -> str:
    """
    Reuse the caller's request ID when one is supplied, otherwise make one.

    WHY: Proxies and clients that already tag requests keep their ID
    across our logs.
    """
    incoming = request.headers.get(REQUEST_ID_HEADER)
    if incoming and incoming.strip():
        return incoming.strip()
    return str(uuid.uuid4())


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that captures request context and logs each request.

    Services pick the ID up through ``get_request_context`` when they log.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and add context.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response with request ID header added
        """
        context = RequestContext(
            request_id=get_request_id(request),
            path=request.url.path,
            method=request.method,
        )
        request.state.context = context
        token = _request_context.set(context)
        started = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = context.request_id

            duration_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{context.method} {context.path} -> {response.status_code} "
                f"({duration_ms:.1f} ms)",
                extra={
                    "request_id": context.request_id,
                    "status_code": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                },
            )
            return response

        finally:
            _request_context.reset(token)
