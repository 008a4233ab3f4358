"""Registration Schemas — request and response bodies for the classroom API.

Invariants:
    - NotificationRequest.notification: stripped, non-empty
    - List fields accept an empty list; emptiness is a domain error (InvalidArgumentError)

Design Decisions:
    - Field names match the public API contract (teacher, students, student, notification)
    - Response models built from core records, never from ORM rows
"""

from pydantic import BaseModel, Field, field_validator

from classroom.core.domain_types import StudentRecord, StudentStatus, TeacherRecord
from classroom.core.roster_sets import sorted_active_emails


class RegisterStudentsRequest(BaseModel):
    """Register students to an existing teacher."""
    teacher: str
    students: list[str]


class SuspendStudentRequest(BaseModel):
    student: str


class NotificationRequest(BaseModel):
    """Notification text whose recipients should be resolved."""
    teacher: str
    notification: str = Field(max_length=10_000)

    @field_validator("notification")
    @classmethod
    def strip_notification(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("notification cannot be empty or whitespace")
        return v


class TeacherCreate(BaseModel):
    email: str


class CommonStudentsResponse(BaseModel):
    students: list[str]


class RecipientsResponse(BaseModel):
    recipients: list[str]


class StudentResponse(BaseModel):
    """Student row as listed; status mirrors the suspended flag."""
    id: int
    email: str
    suspended: bool
    status: StudentStatus

    @classmethod
    def from_record(cls, record: StudentRecord) -> "StudentResponse":
        return cls(
            id=record.id, email=record.email,
            suspended=record.suspended, status=record.status,
        )


class TeacherResponse(BaseModel):
    """Teacher with the emails of its active students."""
    id: int
    email: str
    students: list[str]

    @classmethod
    def from_record(cls, record: TeacherRecord) -> "TeacherResponse":
        return cls(
            id=record.id,
            email=record.email,
            students=sorted_active_emails(record),
        )
