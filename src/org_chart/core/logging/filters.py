# org_chart/core/logging/filters.py
"""
Logging filters.

- RequestIdFilter: guarantees every LogRecord has a `request_id` attribute, read
  from a contextvar set per request by RequestIDMiddleware (or "-" when unset).
  A contextvar, unlike threading.local(), follows the request across awaits.
- RedactFilter: masks credentials in `extra={...}` attributes before any
  handler formats them. Entity payloads are logged as field names only, but a
  caller may still pass e.g. extra={"password": ...}; nested dicts are scrubbed too.

Both filters always return True: they annotate records, they never drop them.
"""

import logging
from logging import LogRecord
import contextvars
from typing import Any

# contextvar for request id (used by RequestIdFilter and the HTTP middleware).
_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)

REDACTED = "***REDACTED***"


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context and return the token to allow reset.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    """
    Reset the contextvar to the previously saved token returned by set_request_id().
    """
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Set `record.request_id` to, in order of preference:
      * the value passed explicitly via extra={"request_id": ...}
      * the contextvar value set by the middleware
      * the sentinel "-"
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    SENSITIVE = {"password", "secret", "token", "access_token", "refresh_token", "authorization"}

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: REDACTED if str(k).lower() in self.SENSITIVE else self._scrub(v)
                for k, v in value.items()
            }
        return value

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = REDACTED
            elif isinstance(record.__dict__[key], dict):
                record.__dict__[key] = self._scrub(record.__dict__[key])
        return True
