from datetime import date
from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from org_chart.database.base import ViewBase


def _alias(name: str) -> dict:
    # Client-facing (masqueraded) name of a column, read by FieldSchema.from_table
    return {"alias": name}


class PersonInfo(ViewBase):
    """
    Read-only view joining person with its job, department and manager.

    Column order matches the select list of the view; rows fetched from it can be
    handed to `org_chart.entities.PersonInfo.from_row` positionally.
    """
    __tablename__ = "person_info"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    job_id: Mapped[int | None] = mapped_column(Integer, info=_alias("jobId"))
    department_id: Mapped[int | None] = mapped_column(Integer, info=_alias("departmentId"))
    manager_id: Mapped[int | None] = mapped_column(Integer, info=_alias("managerId"))
    job_title: Mapped[str | None] = mapped_column(String(50), info=_alias("jobTitle"))
    department_name: Mapped[str | None] = mapped_column(
        String(50), info=_alias("departmentName")
    )
    manager_full_name: Mapped[str | None] = mapped_column(
        String(101), info=_alias("managerFullName")
    )
    first_name: Mapped[str | None] = mapped_column(String(50), info=_alias("firstName"))
    last_name: Mapped[str | None] = mapped_column(String(50), info=_alias("lastName"))
    hire_date: Mapped[date | None] = mapped_column(Date, info=_alias("hireDate"))
