"""Email Rules — canonical form and shape check for every email-shaped identifier.

Invariants:
    - normalize() is total: any input (including None) yields a string, never raises
    - normalize(normalize(x)) == normalize(x)
    - filter_valid() and normalize_all() never grow the input and never repeat a
      canonical value; first-seen order is preserved

Design Decisions:
    - Deliberately loose shape (local@domain.tld, no whitespace, single @) instead of
      RFC 5322: rejecting a real address is worse than accepting an odd one
      (ADR: known looseness, not a defect)
    - filter_valid() returns canonical values, so callers never re-normalize
"""

import re
from collections.abc import Iterable

from classroom.core.domain_types import EmailAddress
from classroom.core.errors import InvalidIdentifierError

EMAIL_SHAPE = r"[^\s@]+@[^\s@]+\.[^\s@]+"
_EMAIL_RE = re.compile(rf"^{EMAIL_SHAPE}$")


def normalize(raw: object) -> EmailAddress:
    """Trim surrounding whitespace and lower-case. Non-strings become ''."""
    if not isinstance(raw, str):
        return EmailAddress("")
    return EmailAddress(raw.strip().lower())


def is_valid(candidate: object) -> bool:
    """True when candidate has the local@domain.tld shape."""
    return isinstance(candidate, str) and _EMAIL_RE.match(candidate) is not None


def dedupe(items: Iterable[str]) -> list[str]:
    """Drop repeats, keeping the first occurrence of each value."""
    return list(dict.fromkeys(items))


def normalize_all(emails: Iterable[object]) -> list[EmailAddress]:
    """Normalize every entry, then deduplicate by canonical value."""
    return dedupe(normalize(e) for e in emails)


def filter_valid(emails: Iterable[object]) -> list[EmailAddress]:
    """Canonical, deduplicated entries that pass is_valid()."""
    return [e for e in normalize_all(emails) if is_valid(e)]


def require_valid(raw: object) -> EmailAddress:
    """Canonical form of raw, or InvalidIdentifierError if it has no email shape."""
    email = normalize(raw)
    if not is_valid(email):
        raise InvalidIdentifierError(raw)
    return email
