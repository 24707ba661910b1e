"""
Declarative bases for the org-chart relational model.

`Base` holds the real tables (created by migrations / `create_all`).
`ViewBase` holds read-only views such as `person_info`; its metadata is kept
separate so `Base.metadata.create_all()` never tries to create a view as a table.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase


# Naming convention for constraints and indexes
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class ViewBase(DeclarativeBase):
    metadata = MetaData()
