from datetime import date

from org_chart import models
from .base import BaseEntity


class PersonInfo(BaseEntity, model=models.PersonInfo):
    """
    Read model of the ``person_info`` view (person joined with job, department
    and manager).

    It has no creation or update contract: build it from a row and read it.
    ``to_json`` always emits every field, with ``null`` for the absent ones, so
    clients get a stable shape whether or not a person has a manager.
    """

    include_absent_as_null = True

    id: int | None
    job_id: int | None
    department_id: int | None
    manager_id: int | None
    job_title: str | None
    department_name: str | None
    manager_full_name: str | None
    first_name: str | None
    last_name: str | None
    hire_date: date | None
