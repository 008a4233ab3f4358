"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every email handed to a store is already normalized and valid
    - Stores return frozen records, never live ORM objects
    - Teachers always come back with their full membership loaded

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the registries await them and
      hand the results to pure core functions
    - Membership is append-only (add_memberships), never "save the whole aggregate":
      a duplicate edge is skipped by the store, not reported to the caller
"""

from collections.abc import Sequence
from typing import Protocol

from classroom.core.domain_types import (
    EmailAddress, StudentId, StudentRecord, TeacherId, TeacherRecord,
)


class StudentStore(Protocol):
    """Contract for student persistence — implemented by shell."""
    async def get_by_email(self, email: EmailAddress) -> StudentRecord | None: ...
    async def get_many_by_emails(
        self, emails: Sequence[EmailAddress], suspended: bool | None = None,
    ) -> list[StudentRecord]: ...
    async def insert_many(
        self, emails: Sequence[EmailAddress],
    ) -> list[StudentRecord]: ...
    async def mark_suspended(self, email: EmailAddress) -> int: ...
    async def scan(
        self, suspended: bool | None = None,
        limit: int | None = None, offset: int | None = None,
    ) -> list[StudentRecord]: ...
    async def count(self, suspended: bool | None = None) -> int: ...


class TeacherStore(Protocol):
    """Contract for teacher + membership persistence — implemented by shell."""
    async def get_by_email(self, email: EmailAddress) -> TeacherRecord | None: ...
    async def get_many_by_emails(
        self, emails: Sequence[EmailAddress],
    ) -> list[TeacherRecord]: ...
    async def insert(self, email: EmailAddress) -> TeacherRecord: ...
    async def add_memberships(
        self, teacher_id: TeacherId, student_ids: Sequence[StudentId],
    ) -> int: ...
    async def scan(
        self, limit: int | None = None, offset: int | None = None,
    ) -> list[TeacherRecord]: ...
    async def count(self) -> int: ...
