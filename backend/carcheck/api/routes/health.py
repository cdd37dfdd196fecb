"""
Health check route.
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from carcheck.api.deps import get_app_settings
from carcheck.config import Settings
from carcheck.schemas.vehicle import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_app_settings)):
    """Liveness probe."""
    return HealthResponse(ok=True, service=settings.service_name, time=datetime.now(UTC).isoformat())
