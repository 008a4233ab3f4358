"""SQL Stores — SQLAlchemy implementations of StudentStore and TeacherStore.

Invariants:
    - Satisfy core/repository_protocols.py structurally (no inheritance)
    - Return frozen records; ORM objects never leave this module
    - Every write commits once; on failure it rolls back and raises StorageFailureError
    - add_memberships() never fails on an edge that already exists

Design Decisions:
    - Session identity map is cleared after each write: later reads in the same
      request see the committed rows, not stale objects
    - Duplicate edges skipped with ON CONFLICT DO NOTHING where the dialect has it
      (PostgreSQL, SQLite); other dialects are refused rather than given a
      weaker path (ADR: concurrent registrations race on the same edge)
"""

import logging
from collections.abc import Sequence
from contextlib import asynccontextmanager

from sqlalchemy import func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from classroom.core.domain_types import (
    EmailAddress, StudentId, StudentRecord, TeacherId, TeacherRecord,
)
from classroom.core.errors import StorageFailureError
from classroom.models.membership import Membership
from classroom.models.student import Student
from classroom.models.teacher import Teacher

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {"postgresql": postgresql.insert, "sqlite": sqlite.insert}


def to_student_record(row: Student) -> StudentRecord:
    return StudentRecord(
        id=StudentId(row.id), email=EmailAddress(row.email),
        suspended=bool(row.suspended),
    )


def to_teacher_record(row: Teacher) -> TeacherRecord:
    return TeacherRecord(
        id=TeacherId(row.id), email=EmailAddress(row.email),
        students=tuple(to_student_record(s) for s in row.students),
    )


@asynccontextmanager
async def storage_guard(db: AsyncSession, operation: str):
    """Roll back and re-raise any SQLAlchemy error as StorageFailureError."""
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"DB {operation} failed: {e}",
            extra={"error_code": "STORAGE_FAILURE"},
        )
        raise StorageFailureError(type(e).__name__, operation) from e


def _window(query, limit: int | None, offset: int | None):
    if limit:
        query = query.limit(limit)
    if offset:
        query = query.offset(offset)
    return query


class SqlStudentStore:
    """StudentStore over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: EmailAddress) -> StudentRecord | None:
        async with storage_guard(self.db, "select"):
            result = await self.db.execute(
                select(Student).where(Student.email == email),
            )
            row = result.scalar_one_or_none()
        return to_student_record(row) if row else None

    async def get_many_by_emails(
        self, emails: Sequence[EmailAddress], suspended: bool | None = None,
    ) -> list[StudentRecord]:
        if not emails:
            return []
        query = select(Student).where(Student.email.in_(list(emails)))
        if suspended is not None:
            query = query.where(Student.suspended.is_(suspended))
        async with storage_guard(self.db, "select"):
            result = await self.db.execute(query.order_by(Student.email))
            rows = result.scalars().all()
        return [to_student_record(r) for r in rows]

    async def insert_many(
        self, emails: Sequence[EmailAddress],
    ) -> list[StudentRecord]:
        """Create all rows in one commit, or none of them."""
        rows = [Student(email=email, suspended=False) for email in emails]
        async with storage_guard(self.db, "insert"):
            self.db.add_all(rows)
            await self.db.commit()
        records = [to_student_record(r) for r in rows]
        self.db.expunge_all()
        return records

    async def mark_suspended(self, email: EmailAddress) -> int:
        """Single UPDATE matching on email only. Returns rows matched."""
        statement = (
            update(Student)
            .where(Student.email == email)
            .values(suspended=True)
            .execution_options(synchronize_session=False)
        )
        async with storage_guard(self.db, "update"):
            result = await self.db.execute(statement)
            await self.db.commit()
        self.db.expunge_all()
        return result.rowcount

    async def scan(
        self, suspended: bool | None = None,
        limit: int | None = None, offset: int | None = None,
    ) -> list[StudentRecord]:
        query = select(Student)
        if suspended is not None:
            query = query.where(Student.suspended.is_(suspended))
        query = _window(query.order_by(Student.email), limit, offset)
        async with storage_guard(self.db, "select"):
            result = await self.db.execute(query)
            rows = result.scalars().all()
        return [to_student_record(r) for r in rows]

    async def count(self, suspended: bool | None = None) -> int:
        query = select(func.count()).select_from(Student)
        if suspended is not None:
            query = query.where(Student.suspended.is_(suspended))
        async with storage_guard(self.db, "count"):
            result = await self.db.execute(query)
        return result.scalar_one()


class SqlTeacherStore:
    """TeacherStore over an AsyncSession. Memberships load eagerly (selectin)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: EmailAddress) -> TeacherRecord | None:
        async with storage_guard(self.db, "select"):
            result = await self.db.execute(
                select(Teacher).where(Teacher.email == email),
            )
            row = result.scalar_one_or_none()
        return to_teacher_record(row) if row else None

    async def get_many_by_emails(
        self, emails: Sequence[EmailAddress],
    ) -> list[TeacherRecord]:
        if not emails:
            return []
        async with storage_guard(self.db, "select"):
            result = await self.db.execute(
                select(Teacher)
                .where(Teacher.email.in_(list(emails)))
                .order_by(Teacher.email),
            )
            rows = result.scalars().all()
        return [to_teacher_record(r) for r in rows]

    async def insert(self, email: EmailAddress) -> TeacherRecord:
        row = Teacher(email=email)
        async with storage_guard(self.db, "insert"):
            self.db.add(row)
            await self.db.commit()
        record = TeacherRecord(id=TeacherId(row.id), email=EmailAddress(row.email))
        self.db.expunge_all()
        return record

    async def add_memberships(
        self, teacher_id: TeacherId, student_ids: Sequence[StudentId],
    ) -> int:
        """Append edges; existing edges are skipped. Returns edges inserted."""
        if not student_ids:
            return 0
        edges = [
            {"teacher_id": teacher_id, "student_id": sid} for sid in student_ids
        ]
        dialect = self.db.get_bind().dialect.name
        dialect_insert = _UPSERT_DIALECTS.get(dialect)
        if dialect_insert is None:
            raise StorageFailureError(
                f"no ON CONFLICT support for dialect '{dialect}'", "insert",
            )
        statement = (
            dialect_insert(Membership.__table__)
            .values(edges)
            .on_conflict_do_nothing(index_elements=["teacher_id", "student_id"])
        )
        async with storage_guard(self.db, "insert"):
            result = await self.db.execute(statement)
            await self.db.commit()
        self.db.expunge_all()
        return result.rowcount

    async def scan(
        self, limit: int | None = None, offset: int | None = None,
    ) -> list[TeacherRecord]:
        query = _window(select(Teacher).order_by(Teacher.email), limit, offset)
        async with storage_guard(self.db, "select"):
            result = await self.db.execute(query)
            rows = result.scalars().all()
        return [to_teacher_record(r) for r in rows]

    async def count(self) -> int:
        async with storage_guard(self.db, "count"):
            result = await self.db.execute(
                select(func.count()).select_from(Teacher),
            )
        return result.scalar_one()
