"""Request Dependencies — per-request registries wired to the request's DB session.

Invariants:
    - One AsyncSession per request, shared by both stores
    - Registries hold no state between requests

Design Decisions:
    - Loggers handed to registries here, so services never reach for a global
"""

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from classroom.config import Settings, get_settings
from classroom.infrastructure.database import get_db
from classroom.infrastructure.sql_stores import SqlStudentStore, SqlTeacherStore
from classroom.services.student_registry import StudentRegistry
from classroom.services.teacher_registry import TeacherRegistry


def get_student_registry(db: AsyncSession = Depends(get_db)) -> StudentRegistry:
    return StudentRegistry(
        SqlStudentStore(db), logging.getLogger("classroom.students"),
    )


def get_teacher_registry(
    db: AsyncSession = Depends(get_db),
) -> TeacherRegistry:
    students = StudentRegistry(
        SqlStudentStore(db), logging.getLogger("classroom.students"),
    )
    return TeacherRegistry(
        SqlTeacherStore(db), students, logging.getLogger("classroom.teachers"),
    )


def page_window(
    limit: int | None, offset: int, settings: Settings | None = None,
) -> tuple[int, int]:
    """Clamp a requested page to the configured default and maximum size."""
    settings = settings or get_settings()
    size = min(limit or settings.default_page_size, settings.max_page_size)
    return size, offset
