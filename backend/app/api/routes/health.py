"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if the process is up
    - No upstream call: ESPN availability does not affect liveness
"""

from fastapi import APIRouter, Depends, status

from app.config import Settings, get_settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": settings.agent_name,
        "version": settings.agent_version,
    }
