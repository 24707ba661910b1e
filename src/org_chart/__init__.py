"""
org_chart: entity mapping and validation layer for the org-chart API backend.

The public surface is re-exported here so controllers can write:

    from org_chart import Job, make_error_response, bad_request
"""

from .entities import Department, Job, Person, PersonInfo, User, ValidationResult
from .api.responses import bad_request, make_error_response
from .exceptions import (
    OrgChartError,
    PayloadShapeError,
    RowShapeError,
    UnknownFieldError,
    InvalidStatusCodeError,
)

__all__ = [
    "Department",
    "Job",
    "Person",
    "PersonInfo",
    "User",
    "ValidationResult",
    "bad_request",
    "make_error_response",
    "OrgChartError",
    "PayloadShapeError",
    "RowShapeError",
    "UnknownFieldError",
    "InvalidStatusCodeError",
]
