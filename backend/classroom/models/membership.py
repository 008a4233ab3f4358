"""Membership ORM — the teacher <-> student edge.

Invariants:
    - (teacher_id, student_id) is the primary key: an edge exists at most once
    - Edges are only ever inserted, never updated or deleted by the application

Design Decisions:
    - Composite primary key doubles as the uniqueness constraint that makes
      concurrent duplicate registrations harmless
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from classroom.db.base import Base


class Membership(Base):
    """Student registered to a teacher."""
    __tablename__ = "teacher_students"

    teacher_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("teachers.id", ondelete="CASCADE"), primary_key=True,
    )
    student_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), primary_key=True,
    )
