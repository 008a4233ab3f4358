"""Teacher Routes — explicit teacher creation, listing, and per-teacher roster.

Invariants:
    - Teachers are created here and nowhere else (registration never creates one)
    - Creating an existing teacher is 409, not a silent success

Design Decisions:
    - Listing returns memberships inline (active students only), ordered by email
"""

from fastapi import APIRouter, Depends, Query, status

from classroom.api.dependencies import get_teacher_registry, page_window
from classroom.schemas.registration import (
    CommonStudentsResponse, TeacherCreate, TeacherResponse,
)
from classroom.services.teacher_registry import TeacherRegistry

router = APIRouter(prefix="/api/v1/teachers", tags=["teachers"])


@router.post(
    "", response_model=TeacherResponse, status_code=status.HTTP_201_CREATED,
)
async def create_teacher(
    body: TeacherCreate,
    registry: TeacherRegistry = Depends(get_teacher_registry),
):
    """Create a teacher with no students."""
    teacher = await registry.enroll(body.email)
    return TeacherResponse.from_record(teacher)


@router.get("")
async def list_teachers(
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    registry: TeacherRegistry = Depends(get_teacher_registry),
):
    """List teachers with pagination."""
    limit, offset = page_window(limit, offset)
    teachers = await registry.list_all(limit, offset)
    return {
        "teachers": [
            TeacherResponse.from_record(t).model_dump() for t in teachers
        ],
        "total": await registry.count(),
        "pagination": {"limit": limit, "offset": offset},
    }


@router.get("/{email}/students", response_model=CommonStudentsResponse)
async def teacher_students(
    email: str, registry: TeacherRegistry = Depends(get_teacher_registry),
):
    """Active students registered to one teacher."""
    students = await registry.get_students(email)
    return CommonStudentsResponse(students=students)
