from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from org_chart.database.base import Base


class User(Base):
    """
    SQLAlchemy model for the `user` table.

    Holds API credentials; both columns are required when a user is created.
    """
    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Username (must be unique and non-null)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    # Hashed password (never store plain-text passwords)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        # Password deliberately left out of the repr
        return f"<User(id={self.id!r}, username={self.username!r})>"
