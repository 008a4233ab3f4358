"""Student Routes — active student listing and counts.

Invariants:
    - Only non-suspended students are listed; totals count everyone

Design Decisions:
    - Read-only: students are created through registration, never directly
"""

from fastapi import APIRouter, Depends, Query

from classroom.api.dependencies import get_student_registry, page_window
from classroom.schemas.registration import StudentResponse
from classroom.services.student_registry import StudentRegistry

router = APIRouter(prefix="/api/v1/students", tags=["students"])


@router.get("")
async def list_students(
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    registry: StudentRegistry = Depends(get_student_registry),
):
    """List active students with pagination."""
    limit, offset = page_window(limit, offset)
    students = await registry.list_active(limit, offset)
    return {
        "students": [
            StudentResponse.from_record(s).model_dump() for s in students
        ],
        "total": await registry.count(),
        "active": await registry.count(suspended=False),
        "pagination": {"limit": limit, "offset": offset},
    }
