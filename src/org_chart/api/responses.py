"""
Request-boundary helpers used by controllers to report client errors.

    make_error_response("title is required")   -> {"error": "title is required"}
    bad_request(callback, "title is required")  -> callback(JSONResponse(400, {...}))
"""

import logging
from collections.abc import Callable
from http import HTTPStatus
from typing import Any

from fastapi.responses import JSONResponse

from org_chart.exceptions import InvalidStatusCodeError

logger = logging.getLogger(__name__)

# Every registered 4xx status the helper accepts
CLIENT_ERROR_STATUSES = frozenset(s for s in HTTPStatus if 400 <= s.value < 500)


def make_error_response(message: str) -> dict[str, Any]:
    """Return the canonical error body ``{"error": message}`` (any string, even empty)."""
    return {"error": message}


def bad_request(
    callback: Callable[[JSONResponse], Any],
    message: str,
    status_code: int = HTTPStatus.BAD_REQUEST,
) -> None:
    """
    Answer a request with a client error.

    Builds a JSON response carrying ``make_error_response(message)`` and hands it
    to ``callback`` synchronously.

    Raises:
        InvalidStatusCodeError: ``status_code`` is not a known 4xx status. This
            signals a bug in the caller and is raised before ``callback`` runs.
    """
    if status_code not in CLIENT_ERROR_STATUSES:
        raise InvalidStatusCodeError(status_code)
    status = HTTPStatus(status_code)
    logger.info(
        "api.bad_request",
        extra={"status_code": status.value, "reason": message},
    )
    callback(JSONResponse(status_code=status.value, content=make_error_response(message)))
