"""Mention Extraction — finds `@someone@school.edu` tokens in free notification text.

Invariants:
    - Never raises: empty or non-string input yields []
    - A mention is '@' immediately followed by an email-shaped token
    - Any address is_valid() accepts can be mentioned, apostrophes and braces included,
      unless its domain contains ',' or ';' or it ends in closing punctuation
    - ',' and ';' end the domain part, so adjacent mentions split on them
    - A trailing run of closing punctuation is trimmed before validation
    - Result order is first occurrence; repeats are dropped (exact-string match)

Design Decisions:
    - Local part uses the validator's character class unchanged; only the domain
      and the token tail are narrowed
    - Captured tokens are re-checked with is_valid() so a trimmed tail can never
      yield an address the store would reject
    - Tokens are returned as written; callers normalize before touching the store
"""

import re

from classroom.core.normalize_email import dedupe, is_valid

_LOCAL = r"[^\s@]+"
_DOMAIN = r"[^\s@,;]+"
_MENTION_RE = re.compile(rf"@({_LOCAL}@{_DOMAIN}\.{_DOMAIN})")

# Sentence punctuation that closes a mention rather than belonging to it.
_TRAILING = ".,;:!?)]}>\"'"


def extract_mentions(text: object) -> list[str]:
    """Return mentioned addresses in order of first occurrence."""
    if not isinstance(text, str) or not text:
        return []

    found = []
    for match in _MENTION_RE.finditer(text):
        candidate = match.group(1).rstrip(_TRAILING)
        if is_valid(candidate):
            found.append(candidate)
    return dedupe(found)
