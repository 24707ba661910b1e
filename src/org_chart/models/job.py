from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from org_chart.database.base import Base


class Job(Base):
    """
    SQLAlchemy model for the `job` table.
    """
    __tablename__ = "job"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Job(id={self.id!r}, title={self.title!r})>"
