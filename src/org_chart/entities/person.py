from datetime import date

from org_chart import models
from .base import Entity


class Person(Entity, model=models.Person):
    """
    A person on the chart.

    Everything except ``manager_id`` is required at creation; ``hire_date`` is
    exchanged as an ISO ``YYYY-MM-DD`` string in JSON.
    """

    id: int | None
    job_id: int | None
    department_id: int | None
    manager_id: int | None
    first_name: str | None
    last_name: str | None
    hire_date: date | None

    @property
    def full_name(self) -> str:
        return f"{self.value_of('first_name')} {self.value_of('last_name')}".strip()
