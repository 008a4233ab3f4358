"""Student ORM — one row per normalized student email.

Invariants:
    - email is unique and non-nullable (normalized before insert)
    - suspended defaults to False and only ever flips to True

Design Decisions:
    - Integer surrogate key: membership edges reference it, not the email
    - No relationship back to teachers: reads always start from the teacher side
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from classroom.db.base import Base


class Student(Base):
    """Student identity and suspension flag."""
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    suspended: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
