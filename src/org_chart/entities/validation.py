"""
Validation engine for inbound JSON payloads.

The checks here are pure predicates over ``(schema, payload)``: they never mutate
the payload and never build an entity, so controllers can validate before
deciding to construct and persist anything. Failures are reported, not raised;
only the first violation (in schema order) is described.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator

from org_chart.exceptions import PayloadShapeError
from .codec import from_json_value
from .masquerade import resolve_masquerade
from .schema import FieldSchema, FieldSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a validation call.

    Truthy iff the payload passed, and unpackable as ``ok, error = result``.
    ``error`` is empty on success and never empty on failure.
    """

    ok: bool
    error: str = ""

    def __bool__(self) -> bool:
        return self.ok

    def __iter__(self) -> Iterator[Any]:
        return iter((self.ok, self.error))


VALID = ValidationResult(True)


def _fail(schema: FieldSchema, message: str, field: str | None = None) -> ValidationResult:
    logger.debug(
        "validation.failed",
        extra={"table": schema.table_name, "field": field, "reason": message},
    )
    return ValidationResult(False, message)


def _check_field(spec: FieldSpec, value: Any) -> str | None:
    """Return an error message for a present value, or None if it is acceptable."""
    if value is None:
        if spec.nullable:
            return None
        return f"The {spec.name} column cannot be null"
    try:
        coerced = from_json_value(spec, value)
    except PayloadShapeError as exc:
        return exc.message
    if spec.max_length is not None and isinstance(coerced, str) and len(coerced) > spec.max_length:
        return (
            f"String length exceeds limit for the {spec.name} field "
            f"(the maximum value is {spec.max_length})"
        )
    return None


def validate_json_for_creation(schema: FieldSchema, payload: Any) -> ValidationResult:
    """
    Check that ``payload`` can create a new record.

    Every field required for creation must be present and non-null, and every
    present field must have the right type. The primary key is ignored.
    """
    if not isinstance(payload, Mapping):
        return _fail(schema, "Payload must be a JSON object")
    for spec in schema:
        if spec.primary_key:
            continue
        if spec.name not in payload:
            if spec.required_for_creation:
                return _fail(schema, f"The {spec.name} column cannot be null", spec.name)
            continue
        error = _check_field(spec, payload[spec.name])
        if error:
            return _fail(schema, error, spec.name)
    return VALID


def validate_json_for_update(schema: FieldSchema, payload: Any) -> ValidationResult:
    """
    Check that ``payload`` can update an existing record.

    The primary key must be present (it identifies the row); all other fields are
    optional but must be well typed when present.
    """
    if not isinstance(payload, Mapping):
        return _fail(schema, "Payload must be a JSON object")
    key = schema.primary_key
    if payload.get(key.name) is None:
        return _fail(
            schema, "The value of primary key must be set in the json object for update", key.name
        )
    for spec in schema:
        if spec.name not in payload:
            continue
        error = _check_field(spec, payload[spec.name])
        if error:
            return _fail(schema, error, spec.name)
    return VALID


def validate_masqueraded_json_for_creation(
    schema: FieldSchema, payload: Any, aliases: Sequence[str]
) -> ValidationResult:
    if not isinstance(payload, Mapping):
        return _fail(schema, "Payload must be a JSON object")
    return validate_json_for_creation(schema, resolve_masquerade(payload, aliases, schema))


def validate_masqueraded_json_for_update(
    schema: FieldSchema, payload: Any, aliases: Sequence[str]
) -> ValidationResult:
    if not isinstance(payload, Mapping):
        return _fail(schema, "Payload must be a JSON object")
    return validate_json_for_update(schema, resolve_masquerade(payload, aliases, schema))
