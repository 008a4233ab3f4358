"""Health Routes — liveness and database readiness for the classroom API.

Invariants:
    - GET /health/ answers 200 whenever the process can serve requests
    - GET /health/ready answers 503 until the session manager exists and the
      database answers SELECT 1

Design Decisions:
    - db_manager is looked up on each call: the lifespan creates it after import
    - Readiness reports the dialect, so a deployment still on SQLite is visible
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import classroom.infrastructure.database as database
from classroom import __version__

router = APIRouter(prefix="/api/v1/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {
        "status": "healthy",
        "service": "classroom-registry",
        "version": __version__,
    }


@router.get("/ready")
async def readiness():
    """Ready once the registries' database can be queried."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("database_not_initialized")
    if not await manager.health_check():
        return _not_ready("database_unavailable")
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "dialect": manager.engine.dialect.name,
    }
