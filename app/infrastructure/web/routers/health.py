"""
Health and readiness probes.
"""

import logging
import time

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.application.dto.base_dto import HealthCheckResponseDTO

logger = logging.getLogger(__name__)
router = APIRouter()

PROCESS_STARTED_AT = time.monotonic()


@router.get("", response_model=HealthCheckResponseDTO)
async def health_check(request: Request):
    """Liveness probe. Returns 200 while the process is up."""
    settings = request.app.state.settings
    return HealthCheckResponseDTO(
        status="OK",
        uptime=round(time.monotonic() - PROCESS_STARTED_AT, 3),
        environment=settings.environment,
        version=settings.api_version
    )


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe, includes database connectivity."""
    manager = getattr(request.app.state, "db_manager", None)
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
