"""ORM Models — SQLAlchemy declarative models for students, teachers and memberships.

Invariants:
    - All models inherit from Base (db/base.py)
    - Emails are stored in normalized form only, unique per table

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from classroom.models.student import Student  # noqa: F401
from classroom.models.teacher import Teacher  # noqa: F401
from classroom.models.membership import Membership  # noqa: F401
