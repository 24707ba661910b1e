from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from org_chart.database.base import Base


class Department(Base):
    """
    SQLAlchemy model for the `department` table.
    """
    __tablename__ = "department"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Display name shown on the chart (required)
    name: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Department(id={self.id!r}, name={self.name!r})>"
