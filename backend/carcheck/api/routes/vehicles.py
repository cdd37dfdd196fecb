"""
Vehicle lookup API routes.

Both endpoints proxy one upstream call with the API key injected server-side.
Failures raise CarCheckError and are rendered as ``{error, details}`` by the
app-level exception handler.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from carcheck.api.deps import get_app_settings
from carcheck.config import Settings
from carcheck.schemas.vehicle import ErrorResponse, VehicleReport
from carcheck.services.vehicle_lookup import check_vehicle, full_report

logger = logging.getLogger(__name__)

# {plate:path} so an empty plate or one containing an encoded "/" still reaches
# validation and gets a 400 instead of falling through to the client catch-all.
router = APIRouter(prefix="/api", tags=["vehicles"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid registration"},
    404: {"model": ErrorResponse, "description": "Vehicle not found upstream"},
    500: {"model": ErrorResponse, "description": "Upstream unavailable or returned an invalid body"},
}


@router.get("/check/{plate:path}", responses=_ERROR_RESPONSES)
async def check(plate: str, settings: Settings = Depends(get_app_settings)) -> dict[str, Any]:
    """Basic DVLA vehicle enquiry, returned as the flat DVLA object."""
    logger.info(f"GET /api/check/{plate}")
    return await check_vehicle(plate, settings)


@router.get(
    "/full/{plate:path}",
    response_model=VehicleReport,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
async def full(plate: str, settings: Settings = Depends(get_app_settings)):
    """Full report from the configured provider, grouped into sections."""
    logger.info(f"GET /api/full/{plate}")
    return await full_report(plate, settings)
