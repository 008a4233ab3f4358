"""Domain Types — verifies records, enums and batch result defaults."""

import dataclasses

import pytest

from classroom.core.domain_types import (
    BatchFailure, BatchResult, EmailAddress, FailureReason, StudentId,
    StudentRecord, StudentStatus, TeacherId, TeacherRecord,
)


def test_student_status_follows_suspended_flag():
    active = StudentRecord(StudentId(1), EmailAddress("a@b.com"))
    suspended = StudentRecord(StudentId(2), EmailAddress("c@d.com"), True)
    assert active.status is StudentStatus.ACTIVE
    assert suspended.status is StudentStatus.SUSPENDED


def test_records_are_frozen():
    record = StudentRecord(StudentId(1), EmailAddress("a@b.com"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.suspended = True


def test_teacher_member_ids():
    teacher = TeacherRecord(
        TeacherId(1), EmailAddress("t@s.com"),
        (
            StudentRecord(StudentId(3), EmailAddress("a@s.com")),
            StudentRecord(StudentId(9), EmailAddress("b@s.com"), True),
        ),
    )
    assert teacher.member_ids() == {3, 9}


def test_batch_result_defaults_are_independent():
    first, second = BatchResult(), BatchResult()
    first.failed.append(BatchFailure("x", FailureReason.INVALID_IDENTIFIER))
    assert second.failed == []
    assert first.total_processed == 0


def test_enums_serialize_to_string():
    assert FailureReason.STORAGE_FAILURE.value == "storage_failure"
    assert StudentStatus.SUSPENDED.value == "suspended"
