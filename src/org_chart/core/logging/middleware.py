# org_chart/core/logging/middleware.py
"""
Request ID middleware for FastAPI / Starlette.

Each request gets an id stored in the request-id contextvar, so every log line
written while handling it (entity merges, validation failures, bad_request
dispatch) carries the same `request_id`. The id is echoed in `X-Request-ID`.

An incoming `X-Request-ID` is reused only when it is a UUID; anything else
(long strings, embedded newlines) is replaced to keep log lines well formed.
"""

import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from .filters import set_request_id, reset_request_id

REQUEST_ID_HEADER = "X-Request-ID"


def _accept_or_generate(incoming: str | None) -> str:
    if incoming:
        try:
            return str(uuid.UUID(incoming))
        except ValueError:
            pass
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Starlette / FastAPI middleware that sets a request id for each incoming request.
    """

    async def dispatch(self, request: Request, call_next):
        rid = _accept_or_generate(request.headers.get(REQUEST_ID_HEADER))
        token = set_request_id(rid)
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            reset_request_id(token)
