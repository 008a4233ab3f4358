"""Error Hierarchy — codes, statuses and the REST envelope."""

import pytest

from classroom.core.errors import (
    ClassroomError, DuplicateIdentifierError, ErrorCategory, ErrorContext,
    InvalidArgumentError, InvalidIdentifierError, ResourceNotFoundError,
    StorageFailureError,
)


@pytest.mark.parametrize("error, code, status", [
    (InvalidIdentifierError("bad"), "INVALID_IDENTIFIER", 400),
    (InvalidArgumentError("empty", "students"), "INVALID_ARGUMENT", 400),
    (ResourceNotFoundError("Teacher", "t@s.com"), "RESOURCE_NOT_FOUND", 404),
    (DuplicateIdentifierError("Teacher", "t@s.com"), "DUPLICATE_IDENTIFIER", 409),
    (StorageFailureError("down", "insert"), "STORAGE_FAILURE", 503),
])
def test_error_codes_and_statuses(error, code, status):
    assert isinstance(error, ClassroomError)
    assert error.code == code
    assert error.http_status == status


def test_to_response_envelope():
    err = ResourceNotFoundError(
        "Student", "kid@s.com", ErrorContext(student_email="kid@s.com"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Student 'kid@s.com' not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"]["student_email"] == "kid@s.com"
    assert "timestamp" in body


def test_invalid_argument_records_field():
    err = InvalidArgumentError("Teacher list cannot be empty", "teacher")
    assert err.field == "teacher"
    assert err.to_response()["error"]["context"]["field"] == "teacher"


def test_storage_failure_message_names_operation():
    assert str(StorageFailureError("timeout", "insert")) == (
        "Database insert failed: timeout"
    )
