# org_chart/api/error_handlers.py
"""
FastAPI exception handlers that map entity-layer exceptions to HTTP responses.

Controllers may let PayloadShapeError (and friends) escape from
`Entity.from_json` / `update_by_json`; these handlers produce the canonical
`{"error": ...}` body (via .to_payload()) and status (via .http_status()).

    from fastapi import FastAPI
    from org_chart.api.error_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

from fastapi import Request
from fastapi.responses import JSONResponse
import logging
from org_chart.exceptions import (
    OrgChartError,
    PayloadShapeError,
    RowShapeError,
    UnknownFieldError,
)

logger = logging.getLogger(__name__)


# Most specific first. The handlers stay tiny: mapping lives on the exception classes.

async def payload_shape_error_handler(request: Request, exc: PayloadShapeError) -> JSONResponse:
    """
    422 for payload values of the wrong type.
    Payload: {"error": "...", "code": "malformed_payload", "fields": [...]}
    """
    logger.info("PayloadShapeError for %s %s: fields=%s", request.method, request.url, exc.fields)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def unknown_field_handler(request: Request, exc: UnknownFieldError) -> JSONResponse:
    logger.info("UnknownFieldError for %s %s: fields=%s", request.method, request.url, exc.fields)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def row_shape_error_handler(request: Request, exc: RowShapeError) -> JSONResponse:
    """
    500: a row that does not match the schema is a server-side defect.
    The body stays generic; details go to the log only.
    """
    logger.error("RowShapeError for %s %s: %s", request.method, request.url, str(exc))
    return JSONResponse(
        status_code=exc.http_status(),
        content={"error": "Internal server error", "code": exc.error_code},
    )


async def org_chart_error_handler(request: Request, exc: OrgChartError) -> JSONResponse:
    """
    Fallback for other entity-layer errors -> 400 by default (or code-defined status).
    """
    logger.warning("OrgChartError for %s %s: %s", request.method, request.url, str(exc))
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


# Helper to register all handlers on an app (call this from your app factory)
def register_exception_handlers(app):
    app.add_exception_handler(PayloadShapeError, payload_shape_error_handler)
    app.add_exception_handler(UnknownFieldError, unknown_field_handler)
    app.add_exception_handler(RowShapeError, row_shape_error_handler)
    app.add_exception_handler(OrgChartError, org_chart_error_handler)
