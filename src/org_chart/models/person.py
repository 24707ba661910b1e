from datetime import date
from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from org_chart.database.base import Base


class Person(Base):
    """
    SQLAlchemy model for the `person` table.

    Each person holds one job in one department and optionally reports to a
    manager, who is another person (self-referencing foreign key).
    """
    __tablename__ = "person"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    job_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("job.id"), nullable=False
    )

    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("department.id"), nullable=False
    )

    # Top of the chart has no manager
    manager_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("person.id"), nullable=True
    )

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)

    last_name: Mapped[str] = mapped_column(String(50), nullable=False)

    hire_date: Mapped[date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Person(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r})>"
        )
