"""
Middleware package.

WHY: Middleware provides cross-cutting concerns like request correlation
and request logging that apply to all requests.
"""

from pet_store.middleware.request_context import (
    REQUEST_ID_HEADER,
    RequestContext,
    RequestContextMiddleware,
    get_request_context,
    get_request_id,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "RequestContext",
    "RequestContextMiddleware",
    "get_request_context",
    "get_request_id",
]
