# org_chart/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   └── base.py                    # Entity-level errors (PayloadShapeError, RowShapeError, ...)

from .base import (
    OrgChartError,
    PayloadShapeError,
    RowShapeError,
    UnknownFieldError,
    InvalidStatusCodeError,
)

__all__ = [
    "OrgChartError",
    "PayloadShapeError",
    "RowShapeError",
    "UnknownFieldError",
    "InvalidStatusCodeError",
]
