"""Teacher ORM — one row per normalized teacher email, plus its student set.

Invariants:
    - email is unique and non-nullable (normalized before insert)
    - students is loaded eagerly (selectin) whenever a teacher is selected

Design Decisions:
    - students is viewonly: edges are written through Membership rows only, never
      by mutating this collection (ADR: append-only membership)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classroom.db.base import Base


class Teacher(Base):
    """Teacher identity and its registered students."""
    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )

    students: Mapped[list["Student"]] = relationship(
        "Student", secondary="teacher_students",
        viewonly=True, lazy="selectin", order_by="Student.email",
    )
