"""
Core pytest configuration for the entire test suite.

This module provides only what ALL tests need: quiet third-party loggers, the
application logging configuration, and a throwaway SQLite database that hands
back real relational rows for the entity tests.

Domain-specific fixtures (entities, payloads, alias tables) are located in:
- tests/test_fixtures/entity_fixtures.py
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import logging
from datetime import date
from typing import Generator

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Set the level for noisy third-party loggers at import time, before importing
# modules that might initialize them (Faker, SQLAlchemy, httpx).
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "asyncio",
    "httpx",
    "urllib3",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from sqlalchemy import create_engine, insert, select
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import aliased

from org_chart.config import get_settings
from org_chart.core.logging.builder import setup_logging
from org_chart.database.base import Base
from org_chart.models import Department, Job, Person, User  # noqa: F401 - registers tables on Base.metadata

settings = get_settings()
logger = logging.getLogger(__name__)


# The `autouse=True` part means pytest uses this fixture without it being requested.
@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Install application logging once for the whole session, so the JSON/color
    formatters and the request id / redaction filters are active in every test.
    """
    setup_logging(settings)
    yield


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine with every table of Base.metadata created."""
    engine = create_engine("sqlite://", echo=False, future=True)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def db_conn(engine: Engine) -> Generator[Connection, None, None]:
    """
    Connection wrapped in a transaction that is rolled back after the test, so
    rows inserted by one test are never seen by the next.
    """
    with engine.connect() as connection:
        trans = connection.begin()
        try:
            yield connection
        finally:
            trans.rollback()


@pytest.fixture()
def seeded_org(db_conn: Connection) -> dict[str, int]:
    """
    Insert a small chart: one department, two jobs, a manager and a report.

    Returns the generated ids keyed by role.
    """
    dept_id = db_conn.execute(
        insert(Department).values(name="Engineering").returning(Department.id)
    ).scalar_one()
    cto_id = db_conn.execute(
        insert(Job).values(title="CTO").returning(Job.id)
    ).scalar_one()
    eng_id = db_conn.execute(
        insert(Job).values(title="Engineer").returning(Job.id)
    ).scalar_one()
    boss_id = db_conn.execute(
        insert(Person)
        .values(
            job_id=cto_id,
            department_id=dept_id,
            manager_id=None,
            first_name="Ada",
            last_name="Lovelace",
            hire_date=date(2015, 3, 1),
        )
        .returning(Person.id)
    ).scalar_one()
    report_id = db_conn.execute(
        insert(Person)
        .values(
            job_id=eng_id,
            department_id=dept_id,
            manager_id=boss_id,
            first_name="Alan",
            last_name="Turing",
            hire_date=date(2020, 1, 15),
        )
        .returning(Person.id)
    ).scalar_one()
    return {
        "department": dept_id,
        "cto_job": cto_id,
        "engineer_job": eng_id,
        "boss": boss_id,
        "report": report_id,
    }


@pytest.fixture()
def person_info_rows(db_conn: Connection, seeded_org: dict[str, int]) -> dict[int, tuple]:
    """
    Rows shaped like the person_info view (same column order), keyed by person id.
    """
    manager = aliased(Person)
    stmt = (
        select(
            Person.id,
            Person.job_id,
            Person.department_id,
            Person.manager_id,
            Job.title,
            Department.name,
            (manager.first_name + " " + manager.last_name),
            Person.first_name,
            Person.last_name,
            Person.hire_date,
        )
        .join(Job, Job.id == Person.job_id)
        .join(Department, Department.id == Person.department_id)
        .outerjoin(manager, manager.id == Person.manager_id)
    )
    return {row[0]: tuple(row) for row in db_conn.execute(stmt)}


# Entity test fixtures
from .test_fixtures.entity_fixtures import (  # noqa: E402,F401
    fake,
    job_aliases,
    sample_job_payload,
    sample_user_payload,
    sample_person_payload,
)
