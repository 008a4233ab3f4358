"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - StudentId, TeacherId wrap the integer surrogate keys assigned by the store
    - EmailAddress is always the normalized (trimmed, lower-cased) form
    - Records are frozen: services never mutate what a store returned
    - TeacherRecord.students is the full membership set, suspended members included

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Plain dataclasses instead of ORM objects: core and services stay free of SQLAlchemy
      (ADR: store Protocols return values, not live entities)
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StudentId = NewType("StudentId", int)
TeacherId = NewType("TeacherId", int)
EmailAddress = NewType("EmailAddress", str)


# ─── Enums ───────────────────────────────────────────────────────

class StudentStatus(str, Enum):
    """Student lifecycle. ACTIVE -> SUSPENDED is one-way."""
    ACTIVE = "active"
    SUSPENDED = "suspended"


class FailureReason(str, Enum):
    """Why a single item in a batch operation did not succeed."""
    INVALID_IDENTIFIER = "invalid_identifier"
    STORAGE_FAILURE = "storage_failure"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class StudentRecord:
    id: StudentId
    email: EmailAddress
    suspended: bool = False

    @property
    def status(self) -> StudentStatus:
        return StudentStatus.SUSPENDED if self.suspended else StudentStatus.ACTIVE


@dataclass(frozen=True)
class TeacherRecord:
    id: TeacherId
    email: EmailAddress
    students: tuple[StudentRecord, ...] = ()

    def member_ids(self) -> set[StudentId]:
        return {s.id for s in self.students}


@dataclass(frozen=True)
class BatchFailure:
    """One rejected input of a batch operation."""
    item: object
    reason: FailureReason


@dataclass
class BatchResult:
    """Outcome of StudentRegistry.bulk_upsert.

    total_processed counts the raw input, before deduplication.
    """
    successful: list[StudentRecord] = field(default_factory=list)
    failed: list[BatchFailure] = field(default_factory=list)
    total_processed: int = 0
