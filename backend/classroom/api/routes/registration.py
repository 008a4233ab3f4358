"""Registration Routes — register, commonstudents, suspend, retrievefornotifications.

Invariants:
    - register and suspend answer 204 with no body on success
    - commonstudents and retrievefornotifications wrap their list in an object
    - Every failure is a ClassroomError rendered by the global handler

Design Decisions:
    - commonstudents takes repeated ?teacher= query params (one or many)
    - No email checks here: the registry raises InvalidIdentifierError itself
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from classroom.api.dependencies import get_teacher_registry
from classroom.schemas.registration import (
    CommonStudentsResponse, NotificationRequest, RecipientsResponse,
    RegisterStudentsRequest, SuspendStudentRequest,
)
from classroom.services.teacher_registry import TeacherRegistry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["registration"])


@router.post("/register", status_code=status.HTTP_204_NO_CONTENT)
async def register_students(
    body: RegisterStudentsRequest,
    registry: TeacherRegistry = Depends(get_teacher_registry),
):
    """Register students to an existing teacher."""
    logger.info(
        f"Registering {len(body.students)} students to teacher: {body.teacher}",
    )
    await registry.register_students(body.teacher, body.students)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/commonstudents", response_model=CommonStudentsResponse)
async def common_students(
    teacher: list[str] = Query([]),
    registry: TeacherRegistry = Depends(get_teacher_registry),
):
    """Students registered to every listed teacher."""
    students = await registry.get_common_students(teacher)
    return CommonStudentsResponse(students=students)


@router.post("/suspend", status_code=status.HTTP_204_NO_CONTENT)
async def suspend_student(
    body: SuspendStudentRequest,
    registry: TeacherRegistry = Depends(get_teacher_registry),
):
    """Suspend a student. Suspending twice is not an error."""
    await registry.suspend_student(body.student)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/retrievefornotifications", response_model=RecipientsResponse)
async def retrieve_for_notifications(
    body: NotificationRequest,
    registry: TeacherRegistry = Depends(get_teacher_registry),
):
    """Active students who should receive a teacher's notification."""
    recipients = await registry.get_notification_recipients(
        body.teacher, body.notification,
    )
    return RecipientsResponse(recipients=recipients)
