"""
Type coercion between JSON values, relational column values and entity values.

Every conversion goes through a pydantic ``TypeAdapter`` for the declared Python
type of the field, so the rules live in one place:

- JSON input is strict: ``"1"`` is not an int and ``true`` is not an int either.
  Dates are accepted as ISO ``YYYY-MM-DD`` strings (nothing else) or ``date`` instances.
- Row input is lax: whatever the driver hands back is converted if pydantic can.
- JSON output uses pydantic's JSON mode (dates become ISO strings).
"""

from __future__ import annotations

import logging
import re
from datetime import date
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from org_chart.exceptions import PayloadShapeError
from .schema import FieldSpec

logger = logging.getLogger(__name__)

# Value-form defaults for absent fields
_ZERO_VALUES: dict[type, Any] = {int: 0, str: "", date: date(1970, 1, 1)}

# Calendar dates only; no timestamps, week dates or time parts
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@lru_cache(maxsize=None)
def _adapter(tp: type) -> TypeAdapter:
    return TypeAdapter(tp)


def zero_value(spec: FieldSpec) -> Any:
    """Type-appropriate default returned by value-form accessors (the epoch for dates)."""
    return _ZERO_VALUES.get(spec.type)


def _type_error(spec: FieldSpec, value: Any) -> PayloadShapeError:
    logger.info(
        "codec.type_mismatch",
        extra={"field": spec.name, "expected": spec.type.__name__,
               "received": type(value).__name__},
    )
    return PayloadShapeError(f"Type error in the {spec.name} field", fields=[spec.name])


def _validate(spec: FieldSpec, value: Any, *, strict: bool) -> Any:
    try:
        return _adapter(spec.type).validate_python(value, strict=strict)
    except ValidationError as exc:
        raise _type_error(spec, value) from exc


def from_json_value(spec: FieldSpec, value: Any) -> Any:
    """
    Coerce a non-null JSON value to the field's Python type.

    Raises:
        PayloadShapeError: if the value has the wrong shape for the field.
    """
    if spec.type is date and isinstance(value, str):
        if not _ISO_DATE.fullmatch(value):
            raise _type_error(spec, value)
        return _validate(spec, value, strict=False)
    return _validate(spec, value, strict=True)


def from_row_value(spec: FieldSpec, value: Any) -> Any:
    """Coerce a non-null column value handed back by a database driver."""
    return _validate(spec, value, strict=False)


def to_json_value(spec: FieldSpec, value: Any) -> Any:
    if value is None:
        return None
    return _adapter(spec.type).dump_python(value, mode="json")
