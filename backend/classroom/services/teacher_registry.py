"""Teacher Registry — teacher identity, membership and the three read queries.

Invariants:
    - Teachers are created only by create()/enroll(), never by register_students()
    - Mentions never create students; unknown or suspended mentions are dropped
    - Membership is a set: re-registering a member is a no-op, not an error
    - get_common_students() returns [] when any named teacher is missing
    - Every list result is sorted ascending and duplicate-free

Design Decisions:
    - Non-auto-creating policy for both teachers and mentioned students
      (ADR: one explicit policy, the two historical variants are incompatible)
    - New members computed by stored id, not by email string, then appended as
      edges (ADR: no whole-aggregate save, no ORM graph diffing)
    - Teacher lookup in notifications is best-effort: ResourceNotFoundError
      contributes nothing; every other error propagates
"""

import logging
from collections.abc import Sequence

from classroom.core.domain_types import EmailAddress, TeacherRecord
from classroom.core.errors import (
    DuplicateIdentifierError, ErrorContext, InvalidArgumentError,
    InvalidIdentifierError, ResourceNotFoundError,
)
from classroom.core.extract_mentions import extract_mentions
from classroom.core.normalize_email import (
    filter_valid, normalize, normalize_all, require_valid,
)
from classroom.core.repository_protocols import TeacherStore
from classroom.core.roster_sets import (
    active_emails, common_active_emails, merge_recipients,
    new_member_ids, sorted_active_emails,
)
from classroom.services.student_registry import StudentRegistry


class TeacherRegistry:
    """Teacher rows, their student memberships, and queries over them."""

    def __init__(
        self,
        store: TeacherStore,
        students: StudentRegistry,
        logger: logging.Logger | None = None,
    ):
        self.store = store
        self.students = students
        self.logger = logger or logging.getLogger(__name__)

    async def find_by_email(self, email: str) -> TeacherRecord | None:
        return await self.store.get_by_email(require_valid(email))

    async def create(self, email: str) -> TeacherRecord:
        """Persist a new teacher with no students.

        Does not check for an existing row; a duplicate surfaces as
        StorageFailureError from the store.
        """
        normalized = require_valid(email)
        teacher = await self.store.insert(normalized)
        self.logger.info(
            f"Created new teacher: {normalized}",
            extra={"teacher_email": normalized},
        )
        return teacher

    async def enroll(self, email: str) -> TeacherRecord:
        """create() guarded by a lookup: an existing teacher is a conflict."""
        normalized = require_valid(email)
        if await self.store.get_by_email(normalized) is not None:
            raise DuplicateIdentifierError(
                "Teacher", normalized, ErrorContext(teacher_email=normalized),
            )
        return await self.create(normalized)

    async def register_students(
        self, teacher_email: str, student_emails: Sequence[str],
    ) -> None:
        if not student_emails:
            raise InvalidArgumentError(
                "Student list cannot be empty", "students",
            )

        teacher = await self._require_teacher(teacher_email)

        valid = filter_valid(student_emails)
        if not valid:
            raise InvalidIdentifierError(
                student_emails, ErrorContext(field="students"),
            )

        upserted = await self.students.bulk_upsert(valid)
        if not upserted.successful:
            self.logger.warning(
                f"No valid students to register for teacher: {teacher.email}",
                extra={"teacher_email": teacher.email},
            )
            return

        fresh = new_member_ids(teacher, upserted.successful)
        if not fresh:
            self.logger.info(
                f"All students already registered to teacher: {teacher.email}",
                extra={"teacher_email": teacher.email},
            )
            return

        added = await self.store.add_memberships(teacher.id, fresh)
        self.logger.info(
            f"Registered {added} students to teacher: {teacher.email}",
            extra={"teacher_email": teacher.email, "count": added},
        )

    async def get_students(self, teacher_email: str) -> list[EmailAddress]:
        """Sorted emails of the teacher's non-suspended students."""
        teacher = await self._require_teacher(teacher_email)
        return sorted_active_emails(teacher)

    async def get_common_students(
        self, teacher_emails: Sequence[str],
    ) -> list[EmailAddress]:
        """Students registered to every named teacher."""
        if not teacher_emails:
            raise InvalidArgumentError(
                "Teacher list cannot be empty", "teacher",
            )

        requested = filter_valid(teacher_emails)
        if not requested:
            raise InvalidIdentifierError(
                teacher_emails, ErrorContext(field="teacher"),
            )

        teachers = await self.store.get_many_by_emails(requested)
        found = {t.email for t in teachers}
        if len(found) < len(requested):
            missing = [e for e in requested if e not in found]
            self.logger.warning(f"Teachers not found: {', '.join(missing)}")
            return []

        return common_active_emails(teachers)

    async def get_notification_recipients(
        self, teacher_email: str, text: str,
    ) -> list[str]:
        """Registered active students plus active students mentioned in text."""
        normalized = normalize(teacher_email)
        try:
            registered = await self.get_students(normalized)
        except ResourceNotFoundError:
            registered = []

        mentioned: set[EmailAddress] = set()
        mentions = normalize_all(extract_mentions(text))
        if mentions:
            found = await self.students.find_many_by_emails(
                mentions, active_only=True,
            )
            mentioned = active_emails(found)

        recipients = merge_recipients(registered, mentioned)
        self.logger.info(
            f"Notification recipients for {normalized}: {len(recipients)} students",
            extra={"teacher_email": normalized, "count": len(recipients)},
        )
        return recipients

    async def suspend_student(self, email: str) -> None:
        await self.students.suspend(email)

    async def list_all(
        self, limit: int | None = None, offset: int | None = None,
    ) -> list[TeacherRecord]:
        """Teachers ordered by email, memberships attached."""
        return await self.store.scan(limit=limit or None, offset=offset or None)

    async def count(self) -> int:
        return await self.store.count()

    async def _require_teacher(self, email: str) -> TeacherRecord:
        teacher = await self.find_by_email(email)
        if teacher is None:
            normalized = normalize(email)
            raise ResourceNotFoundError(
                "Teacher", normalized, ErrorContext(teacher_email=normalized),
            )
        return teacher
