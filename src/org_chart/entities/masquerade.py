"""
Masquerade resolver: client-facing alias names <-> internal field names.

Alias tables are flat alternating lists ``[external, internal, external, internal, ...]``.
Entries whose internal name is not part of the schema, and a trailing unpaired
entry, are ignored without error; clients may send alias tables shared between
endpoints, so unknown pairs are not treated as mistakes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any

from .schema import FieldSchema

logger = logging.getLogger(__name__)


def alias_map(aliases: Sequence[str], schema: FieldSchema) -> dict[str, str]:
    """
    Return ``{external: internal}`` for every usable pair of ``aliases``.

    Later pairs win when the same external name appears twice. Each distinct
    table is resolved, and its ignored entries logged, once per schema.
    """
    return dict(_resolved_pairs(tuple(aliases), schema))


@lru_cache(maxsize=256)
def _resolved_pairs(aliases: tuple[str, ...], schema: FieldSchema) -> tuple[tuple[str, str], ...]:
    mapping: dict[str, str] = {}
    if len(aliases) % 2:
        logger.debug(
            "masquerade.unpaired_alias_ignored",
            extra={"table": schema.table_name, "alias": aliases[-1]},
        )
    for external, internal in zip(aliases[0::2], aliases[1::2]):
        if internal not in schema:
            logger.debug(
                "masquerade.unknown_field_ignored",
                extra={"table": schema.table_name, "alias": external, "internal": internal},
            )
            continue
        mapping[external] = internal
    return tuple(mapping.items())


def resolve_masquerade(
    payload: Mapping[str, Any], aliases: Sequence[str], schema: FieldSchema
) -> dict[str, Any]:
    """
    Return a new payload with known external names rewritten to internal names.

    Unmatched keys pass through unchanged. When both an alias and the internal
    name it maps to are present, the aliased value wins. ``payload`` is not modified.
    """
    mapping = alias_map(aliases, schema)
    resolved: dict[str, Any] = {}
    aliased: set[str] = set()
    for key, value in payload.items():
        internal = mapping.get(key)
        if internal is not None:
            resolved[internal] = value
            aliased.add(internal)
        elif key not in aliased:
            resolved[key] = value
    return resolved


def masquerade_json(
    data: Mapping[str, Any], aliases: Sequence[str], schema: FieldSchema
) -> dict[str, Any]:
    """Outbound inverse of :func:`resolve_masquerade`: rename internal keys to aliases."""
    outbound = {internal: external for external, internal in alias_map(aliases, schema).items()}
    return {outbound.get(key, key): value for key, value in data.items()}
