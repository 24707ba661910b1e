"""
Entity base classes.

An entity holds one value per schema field, each independently present or
absent. Present values live in a private dict owned by the instance; a field is
absent when it has no entry. Because a present value is never ``None``, the
optional-form accessor (attribute access or :meth:`BaseEntity.get`) returns
``None`` exactly when the field is absent, while :meth:`BaseEntity.value_of`
returns a type-appropriate default instead.

Subclasses bind to a SQLAlchemy model through a class keyword:

    class Job(Entity, model=models.Job):
        id: int | None
        title: str | None

which builds the immutable :class:`FieldSchema` once and installs one
attribute accessor per field.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from sqlalchemy import Table

from org_chart.exceptions import PayloadShapeError, RowShapeError
from . import validation
from .codec import from_json_value, from_row_value, to_json_value, zero_value
from .masquerade import masquerade_json, resolve_masquerade
from .schema import FieldSchema, FieldSpec

logger = logging.getLogger(__name__)


class FieldAccessor:
    """Attribute descriptor exposing one schema field (optional form on get)."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __get__(self, instance: BaseEntity | None, owner: type[BaseEntity]) -> Any:
        if instance is None:
            # Class access returns the descriptor of the field, e.g. Job.title.max_length
            return owner.__schema__.field(self.name)
        return instance._values.get(self.name)

    def __set__(self, instance: BaseEntity, value: Any) -> None:
        instance._assign(self.name, value)

    def __repr__(self) -> str:
        return f"FieldAccessor({self.name!r})"


class BaseEntity:
    """
    Read-only entity: row construction, accessors and JSON emission.

    Used directly by composed views (PersonInfo); table-backed entities use
    :class:`Entity`, which adds JSON construction, setters and update merges.
    """

    __schema__: ClassVar[FieldSchema]

    # Emit absent fields as explicit nulls in to_json() (read models only)
    include_absent_as_null: ClassVar[bool] = False

    def __init_subclass__(cls, *, model: Any = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if model is None:
            return
        table = model if isinstance(model, Table) else model.__table__
        cls.__schema__ = FieldSchema.from_table(table)
        for spec in cls.__schema__:
            existing = next(
                (klass.__dict__[spec.name] for klass in cls.__mro__ if spec.name in klass.__dict__),
                None,
            )
            if existing is not None and not isinstance(existing, FieldAccessor):
                raise TypeError(
                    f"{cls.__name__}.{spec.name} clashes with a column of {table.name}"
                )
            setattr(cls, spec.name, FieldAccessor(spec.name))

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    # ------------------------
    # Construction
    # ------------------------
    @classmethod
    def from_row(cls, row: Sequence[Any] | Mapping[str, Any], offset: int = 0):
        """
        Build an entity from a relational row.

        ``row`` is either a sequence holding one value per schema column in schema
        order (starting at ``offset``, for rows of a wider join), or a mapping
        keyed by column name such as SQLAlchemy's ``Row._mapping``. ``None``
        values, and columns missing from a mapping, leave the field absent.
        """
        schema = cls.__schema__
        entity = cls()
        if isinstance(row, Mapping):
            columns = ((spec, row.get(spec.name)) for spec in schema)
        else:
            if len(row) < offset + len(schema):
                raise RowShapeError(
                    f"{schema.table_name} row needs {len(schema)} columns from offset "
                    f"{offset}, got a row of {len(row)}"
                )
            columns = ((spec, row[offset + i]) for i, spec in enumerate(schema))
        for spec, value in columns:
            if value is not None:
                entity._values[spec.name] = from_row_value(spec, value)
        return entity

    # ------------------------
    # Accessors
    # ------------------------
    def get(self, name: str) -> Any:
        """Optional form: the value, or ``None`` when the field is absent."""
        self.__schema__.field(name)
        return self._values.get(name)

    def value_of(self, name: str) -> Any:
        """Value form: the value, or the type's default (0, "", 1970-01-01 for dates) when absent."""
        spec = self.__schema__.field(name)
        value = self._values.get(name)
        return zero_value(spec) if value is None else value

    def is_present(self, name: str) -> bool:
        self.__schema__.field(name)
        return name in self._values

    @property
    def primary_key(self) -> Any:
        """
        Value form of the key field.

        0 for an entity that has no key yet; use ``is_present`` to tell an unsaved
        entity from one whose key really is 0.
        """
        return self.value_of(self.__schema__.primary_key.name)

    def _assign(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    # ------------------------
    # JSON emission
    # ------------------------
    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for spec in self.__schema__:
            if spec.name in self._values:
                data[spec.name] = to_json_value(spec, self._values[spec.name])
            elif self.include_absent_as_null:
                data[spec.name] = None
        return data

    def to_masqueraded_json(self, aliases: Sequence[str] | None = None) -> dict[str, Any]:
        """
        Emit JSON with client-facing names.

        Without ``aliases`` the aliases declared on the model columns are used.
        """
        if aliases is None:
            aliases = self.__schema__.aliases()
        return masquerade_json(self.to_json(), aliases, self.__schema__)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # mutable value object

    def __repr__(self) -> str:
        present = ", ".join(
            f"{spec.name}={self._values[spec.name]!r}"
            for spec in self.__schema__
            if spec.name in self._values
        )
        return f"{type(self).__name__}({present})"


class Entity(BaseEntity):
    """
    Writable entity backed by a table.

    Tracks which fields changed since it was loaded (``dirty_fields``) so the
    persistence layer can issue narrow updates.
    """

    def __init__(self) -> None:
        super().__init__()
        self._dirty: set[str] = set()

    # ------------------------
    # JSON construction and merge
    # ------------------------
    @classmethod
    def from_json(cls, payload: Mapping[str, Any]):
        """
        Build an entity from a JSON object.

        Only keys naming schema fields are read (the primary key included); every
        other field stays absent. Construction never checks completeness, see
        :meth:`validate_json_for_creation` for that.

        Raises:
            PayloadShapeError: a value cannot be coerced to its field's type.
        """
        entity = cls()
        entity._merge(payload, include_primary_key=True)
        return entity

    @classmethod
    def from_masqueraded_json(cls, payload: Mapping[str, Any], aliases: Sequence[str]):
        cls._require_object(payload)
        return cls.from_json(resolve_masquerade(payload, aliases, cls.__schema__))

    def update_by_json(self, payload: Mapping[str, Any]) -> None:
        """
        Merge a partial JSON object into this entity.

        Keys naming non-key fields overwrite them; the primary key never changes;
        fields missing from the payload are untouched. A ``null`` clears a
        nullable field and is rejected for a NOT NULL one. Nothing is applied if
        any value is rejected.
        """
        self._merge(payload, include_primary_key=False)

    def update_by_masqueraded_json(self, payload: Mapping[str, Any], aliases: Sequence[str]) -> None:
        self._require_object(payload)
        self.update_by_json(resolve_masquerade(payload, aliases, self.__schema__))

    @staticmethod
    def _require_object(payload: Any) -> None:
        if not isinstance(payload, Mapping):
            raise PayloadShapeError("Payload must be a JSON object")

    def _merge(self, payload: Mapping[str, Any], *, include_primary_key: bool) -> None:
        self._require_object(payload)
        staged: dict[str, Any] = {}
        for spec in self.__schema__:
            if spec.name not in payload:
                continue
            if spec.primary_key and not include_primary_key:
                continue
            value = payload[spec.name]
            if value is None:
                # Only nullable columns can be cleared; the key may be cleared before insert
                if not spec.nullable and not spec.primary_key:
                    raise PayloadShapeError(
                        f"The {spec.name} column cannot be null", fields=[spec.name]
                    )
                staged[spec.name] = None
            else:
                staged[spec.name] = from_json_value(spec, value)
        for name, value in staged.items():
            self._store(name, value)
        if staged:
            logger.debug(
                "entity.merged",
                extra={"entity": type(self).__name__, "fields": list(staged)},
            )

    def _store(self, name: str, value: Any) -> None:
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value
        self._dirty.add(name)

    def _assign(self, name: str, value: Any) -> None:
        spec: FieldSpec = self.__schema__.field(name)
        if value is None:
            if not spec.nullable:
                raise PayloadShapeError(f"The {name} column cannot be null", fields=[name])
            self._store(name, None)
            return
        self._store(name, from_json_value(spec, value))

    # ------------------------
    # Persistence parameters
    # ------------------------
    def dirty_fields(self) -> tuple[str, ...]:
        return tuple(name for name in self.__schema__.names if name in self._dirty)

    def update_params(self) -> dict[str, Any]:
        """Dirty non-key columns and their values (``None`` for cleared columns)."""
        return {
            spec.name: self._values.get(spec.name)
            for spec in self.__schema__
            if spec.name in self._dirty and not spec.primary_key
        }

    def insert_params(self) -> dict[str, Any]:
        """Present non-key columns and their values."""
        return {
            spec.name: self._values[spec.name]
            for spec in self.__schema__
            if spec.name in self._values and not spec.primary_key
        }

    # ------------------------
    # Validation
    # ------------------------
    @classmethod
    def validate_json_for_creation(cls, payload: Any) -> validation.ValidationResult:
        return validation.validate_json_for_creation(cls.__schema__, payload)

    @classmethod
    def validate_masqueraded_json_for_creation(
        cls, payload: Any, aliases: Sequence[str]
    ) -> validation.ValidationResult:
        return validation.validate_masqueraded_json_for_creation(cls.__schema__, payload, aliases)

    @classmethod
    def validate_json_for_update(cls, payload: Any) -> validation.ValidationResult:
        return validation.validate_json_for_update(cls.__schema__, payload)

    @classmethod
    def validate_masqueraded_json_for_update(
        cls, payload: Any, aliases: Sequence[str]
    ) -> validation.ValidationResult:
        return validation.validate_masqueraded_json_for_update(cls.__schema__, payload, aliases)
