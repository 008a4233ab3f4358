"""Roster Set Arithmetic — pure projections over teacher memberships.

Invariants:
    - Suspended students never appear in any projection
    - Every result is sorted ascending and duplicate-free
    - common_active_emails() is independent of teacher order

Design Decisions:
    - Pure functions over TeacherRecord values: no IO, trivially testable
      (ADR: functional core, imperative shell)
"""

from collections.abc import Iterable, Sequence

from classroom.core.domain_types import (
    EmailAddress, StudentId, StudentRecord, TeacherRecord,
)


def active_emails(students: Iterable[StudentRecord]) -> set[EmailAddress]:
    return {s.email for s in students if not s.suspended}


def sorted_active_emails(teacher: TeacherRecord) -> list[EmailAddress]:
    """A teacher's non-suspended member emails, sorted."""
    return sorted(active_emails(teacher.students))


def common_active_emails(teachers: Sequence[TeacherRecord]) -> list[EmailAddress]:
    """Intersection of every teacher's active member emails, sorted.

    No teachers means no common students.
    """
    if not teachers:
        return []
    if len(teachers) == 1:
        return sorted_active_emails(teachers[0])
    common = set.intersection(*(active_emails(t.students) for t in teachers))
    return sorted(common)


def new_member_ids(
    teacher: TeacherRecord, candidates: Iterable[StudentRecord],
) -> list[StudentId]:
    """Ids of candidates not yet in the teacher's membership, first-seen order."""
    existing = teacher.member_ids()
    fresh: list[StudentId] = []
    for student in candidates:
        if student.id not in existing:
            existing.add(student.id)
            fresh.append(student.id)
    return fresh


def merge_recipients(*groups: Iterable[str]) -> list[str]:
    """Union of recipient groups, sorted."""
    merged: set[str] = set()
    for group in groups:
        merged.update(group)
    return sorted(merged)
