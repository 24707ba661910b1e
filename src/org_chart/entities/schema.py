"""
Field schemas: the immutable per-entity table of field descriptors.

A schema is derived once from a SQLAlchemy table (column order, Python type,
nullability, primary key, defaults, string length and the optional client alias
stored in ``Column.info["alias"]``) and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator

from sqlalchemy import Table

from org_chart.exceptions import UnknownFieldError


@dataclass(frozen=True)
class FieldSpec:
    """Descriptor of one entity field."""

    name: str
    type: type
    alias: str | None = None
    nullable: bool = True
    primary_key: bool = False
    has_default: bool = False
    max_length: int | None = None

    @property
    def required_for_creation(self) -> bool:
        # Same rule as a NOT NULL column without client/server default that is not the key
        return not self.nullable and not self.primary_key and not self.has_default


class FieldSchema:
    """Ordered, read-only collection of FieldSpec for one entity type."""

    __slots__ = ("table_name", "_fields", "_by_name", "_primary_key")

    def __init__(self, table_name: str, fields: tuple[FieldSpec, ...]) -> None:
        keys = [f for f in fields if f.primary_key]
        if len(keys) != 1:
            raise ValueError(
                f"{table_name} must declare exactly one primary key, found {len(keys)}"
            )
        self.table_name = table_name
        self._fields = tuple(fields)
        self._by_name = MappingProxyType({f.name: f for f in self._fields})
        self._primary_key = keys[0]

    @classmethod
    def from_table(cls, table: Table) -> FieldSchema:
        """Build a schema from a SQLAlchemy ``Table`` (e.g. ``Model.__table__``)."""
        fields = []
        for col in table.columns:
            has_default = col.default is not None or col.server_default is not None
            fields.append(
                FieldSpec(
                    name=col.name,
                    type=col.type.python_type,
                    alias=col.info.get("alias"),
                    nullable=bool(col.nullable) and not col.primary_key,
                    primary_key=col.primary_key,
                    has_default=has_default,
                    max_length=getattr(col.type, "length", None),
                )
            )
        return cls(table.name, tuple(fields))

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        return self._fields

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self._fields)

    @property
    def primary_key(self) -> FieldSpec:
        return self._primary_key

    @property
    def required_for_creation(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self._fields if f.required_for_creation)

    def field(self, name: str) -> FieldSpec:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownFieldError(
                f"{self.table_name} has no field named {name!r}", fields=[name]
            ) from None

    def aliases(self) -> list[str]:
        """Flat ``[external, internal, ...]`` list built from the declared column aliases."""
        pairs: list[str] = []
        for f in self._fields:
            if f.alias:
                pairs.extend((f.alias, f.name))
        return pairs

    def __contains__(self, name: Any) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldSchema({self.table_name!r}, fields={list(self.names)!r})"
