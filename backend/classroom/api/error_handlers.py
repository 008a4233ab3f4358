"""Error Handlers — render every failure as the classroom error envelope.

Invariants:
    - Every error body is {"error": {code, message, category, severity, ...}}
    - ClassroomError keeps its own status; a malformed request is 400; anything else 500
    - The 500 body never carries the exception text

Design Decisions:
    - Malformed bodies share INVALID_ARGUMENT's status but keep their own
      VALIDATION_ERROR code plus per-field details
    - Field paths drop the leading body/query segment: "students.0", not "body.students.0"
    - 4xx logged at warning, 5xx at error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from classroom.core.errors import ClassroomError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the classroom, request-validation and catch-all handlers."""

    @app.exception_handler(ClassroomError)
    async def classroom_error_handler(request: Request, exc: ClassroomError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{exc.code} on {request.url.path}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = [field_error(e) for e in exc.errors()]
        logger.warning(
            f"Rejected request on {request.url.path}: "
            f"{', '.join(d['field'] for d in details)}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope(
                "VALIDATION_ERROR", "Invalid request data",
                ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
            ),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.url.path}",
            exc_info=exc,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )


def error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **extra,
) -> dict:
    """Envelope for errors that are not ClassroomError instances."""
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


def field_error(error: dict) -> dict:
    location = [str(part) for part in error["loc"]]
    if len(location) > 1 and location[0] in ("body", "query", "path"):
        location = location[1:]
    return {
        "field": ".".join(location),
        "message": error["msg"],
        "type": error["type"],
    }
