"""Student Registry — student identity, suspension state and batch upsert.

Invariants:
    - Every email is normalized before it reaches the store
    - find_by_email() raises InvalidIdentifierError on bad input; absent is None, not an error
    - bulk_upsert() isolates failures per item; only the creation sub-step is all-or-nothing
    - suspend() matches on email only, so suspending twice succeeds both times
    - Suspension is one-way: there is no operation that clears it

Design Decisions:
    - Lookups before inserts: existing rows go straight to `successful`, only
      the remainder is created (ADR: idempotent re-registration)
    - StorageFailureError during upsert is recorded per item, not raised: the
      caller decides whether an empty result is fatal
"""

import logging
from collections.abc import Sequence

from classroom.core.domain_types import (
    BatchFailure, BatchResult, FailureReason, StudentRecord,
)
from classroom.core.errors import (
    ErrorContext, ResourceNotFoundError, StorageFailureError,
)
from classroom.core.normalize_email import (
    filter_valid, is_valid, normalize, normalize_all, require_valid,
)
from classroom.core.repository_protocols import StudentStore


class StudentRegistry:
    """Owns student rows: lookup, creation, suspension, listing."""

    def __init__(self, store: StudentStore, logger: logging.Logger | None = None):
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    async def find_by_email(self, email: str) -> StudentRecord | None:
        return await self.store.get_by_email(require_valid(email))

    async def find_many_by_emails(
        self, emails: Sequence[str], active_only: bool = False,
    ) -> list[StudentRecord]:
        """Stored students matching any valid entry; invalid entries are dropped.

        Order is whatever the store returns.
        """
        if not emails:
            return []
        valid = filter_valid(emails)
        if not valid:
            return []
        return await self.store.get_many_by_emails(
            valid, suspended=False if active_only else None,
        )

    async def bulk_upsert(self, emails: Sequence[str]) -> BatchResult:
        """Resolve existing students and create the missing ones in one batch."""
        result = BatchResult(total_processed=len(emails))
        if not emails:
            return result

        accepted = []
        for raw in emails:
            if is_valid(normalize(raw)):
                accepted.append(raw)
            else:
                result.failed.append(
                    BatchFailure(raw, FailureReason.INVALID_IDENTIFIER),
                )
        if not accepted:
            return result

        normalized = normalize_all(accepted)
        try:
            existing = await self.store.get_many_by_emails(normalized)
        except StorageFailureError as e:
            self.logger.error(
                f"Failed to look up students for upsert: {e.message}",
                extra={"error_code": e.code, "count": len(normalized)},
            )
            result.failed.extend(
                BatchFailure(email, FailureReason.STORAGE_FAILURE)
                for email in normalized
            )
            return result

        result.successful.extend(existing)
        known = {s.email for s in existing}
        missing = [email for email in normalized if email not in known]
        if not missing:
            return result

        try:
            created = await self.store.insert_many(missing)
        except StorageFailureError as e:
            self.logger.error(
                f"Failed to bulk create students: {e.message}",
                extra={"error_code": e.code, "count": len(missing)},
            )
            result.failed.extend(
                BatchFailure(email, FailureReason.STORAGE_FAILURE)
                for email in missing
            )
            return result

        result.successful.extend(created)
        self.logger.info(
            f"Successfully created {len(created)} new students",
            extra={"count": len(created)},
        )
        return result

    async def suspend(self, email: str) -> None:
        """Flag a student as suspended. Re-suspending is a successful no-op."""
        normalized = require_valid(email)
        affected = await self.store.mark_suspended(normalized)
        if affected == 0:
            raise ResourceNotFoundError(
                "Student", normalized,
                ErrorContext(student_email=normalized),
            )
        self.logger.info(
            f"Suspended student: {normalized}",
            extra={"student_email": normalized},
        )

    async def list_active(
        self, limit: int | None = None, offset: int | None = None,
    ) -> list[StudentRecord]:
        """Non-suspended students ordered by email. 0/None means no window."""
        return await self.store.scan(
            suspended=False, limit=limit or None, offset=offset or None,
        )

    async def count(self, suspended: bool | None = None) -> int:
        return await self.store.count(suspended)
