"""Email Rules — canonical form, shape check, and batch helpers.

Tests cover:
    - normalize() trims, lower-cases, is idempotent and total
    - is_valid() accepts the loose local@domain.tld shape only
    - filter_valid()/normalize_all() dedupe by canonical value, keep first-seen order
    - require_valid() raises InvalidIdentifierError on anything without the shape
"""

import pytest

from classroom.core.errors import InvalidIdentifierError
from classroom.core.normalize_email import (
    filter_valid, is_valid, normalize, normalize_all, require_valid,
)


def test_normalize_trims_and_lowercases():
    assert normalize("  TeacherKen@Gmail.COM \n") == "teacherken@gmail.com"


@pytest.mark.parametrize("raw", [
    "Student@X.io", "  a@b.co  ", "already@lower.case", "", "   ", "no-at-sign",
])
def test_normalize_is_idempotent(raw):
    assert normalize(normalize(raw)) == normalize(raw)


@pytest.mark.parametrize("raw", [None, 42, ["a@b.com"]])
def test_normalize_non_string_is_empty(raw):
    assert normalize(raw) == ""


@pytest.mark.parametrize("candidate", [
    "studentjon@gmail.com",
    "first.last+tag@school.edu.sg",
    "o'brien@example.ie",
    "x@y.z",
])
def test_is_valid_accepts_email_shape(candidate):
    assert is_valid(candidate)


@pytest.mark.parametrize("candidate", [
    "", "plainaddress", "@gmail.com", "student@", "student@gmail",
    "two@@gmail.com", "has space@gmail.com", "a@b@c.com", None, 7,
])
def test_is_valid_rejects_non_email_shape(candidate):
    assert not is_valid(candidate)


def test_normalize_all_dedupes_by_canonical_value_in_first_seen_order():
    result = normalize_all(["B@x.com", "a@x.com", " b@X.com ", "A@x.com"])
    assert result == ["b@x.com", "a@x.com"]


def test_filter_valid_drops_invalid_and_duplicates():
    result = filter_valid([
        "Jon@gmail.com", "not-an-email", "jon@gmail.com ", "hon@gmail.com", "",
    ])
    assert result == ["jon@gmail.com", "hon@gmail.com"]


def test_batch_helpers_never_grow_input():
    raw = ["a@b.com", "A@B.COM", "bad", "c@d.com", "c@d.com"]
    assert len(normalize_all(raw)) <= len(raw)
    assert len(filter_valid(raw)) <= len(raw)
    assert len(set(filter_valid(raw))) == len(filter_valid(raw))


def test_require_valid_returns_canonical_form():
    assert require_valid(" Kid@School.EDU ") == "kid@school.edu"


@pytest.mark.parametrize("raw", ["", "   ", None, "nope", "a@b"])
def test_require_valid_rejects_bad_identifiers(raw):
    with pytest.raises(InvalidIdentifierError) as exc:
        require_valid(raw)
    assert exc.value.code == "INVALID_IDENTIFIER"
    assert exc.value.http_status == 400
