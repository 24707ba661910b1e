"""
Custom exceptions for the entity mapping layer.
"""

from typing import Iterable

# canonical entity-layer exception

class OrgChartError(Exception):
    """
    Base exception for entity mapping errors.

    - message: human-friendly message (safe to show to clients)
    - fields: optional list of field names related to the error (e.g., ['title'])
    - error_code: canonical short code (e.g., 'malformed_payload') used by clients
    """

    # Map canonical error_code -> default HTTP status.
    ERROR_CODE_TO_STATUS = {
        "malformed_payload": 422,
        "unknown_field": 422,
        "malformed_row": 500,
        # fallback: default to 400 for general entity errors
    }

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 error_code: str | None = None):
        super().__init__(message)
        self.message = message  # user-friendly message
        self.fields = list(fields) if fields else None
        self.error_code = error_code

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.fields:
            parts.append(f"fields: {', '.join(self.fields)}")
        if self.error_code:
            parts.append(f"code: {self.error_code}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def to_payload(self) -> dict:
        """
        Return a JSON-serializable dict suitable for HTTP responses.
        Standard shape:
            {
                "error": "A human-friendly message",
                "code": "malformed_payload",   # optional canonical code
                "fields": ["title"],           # optional list for client usage
            }
        """
        payload = {"error": self.message}
        if self.error_code:
            payload["code"] = self.error_code
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload

    def http_status(self) -> int:
        """
        Return the HTTP status code that should accompany this error.
        Looked up from ERROR_CODE_TO_STATUS, 400 otherwise.
        """
        if self.error_code:
            return self.ERROR_CODE_TO_STATUS.get(self.error_code, 400)
        return 400


class PayloadShapeError(OrgChartError):
    """Raised when a JSON value cannot be coerced to the declared type of its field."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="malformed_payload")


class RowShapeError(OrgChartError):
    """Raised when a relational row does not carry one value per schema column."""

    def __init__(self, message: str):
        super().__init__(message, error_code="malformed_row")


class UnknownFieldError(OrgChartError, KeyError):
    """Raised when a caller names a field that is not part of the entity schema."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="unknown_field")


class InvalidStatusCodeError(ValueError):
    """
    Raised by the bad-request helper when given a status code outside 4xx.

    This is a defect in calling code, not a client error, so it intentionally does
    not derive from OrgChartError and is never rendered into a response.
    """

    def __init__(self, status_code: int):
        super().__init__(f"{status_code!r} is not a client error status code (expected 4xx)")
        self.status_code = status_code


__all__ = [
    "OrgChartError",
    "PayloadShapeError",
    "RowShapeError",
    "UnknownFieldError",
    "InvalidStatusCodeError",
]
