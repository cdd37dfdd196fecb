"""
Vehicle lookup service: one best-effort upstream call per request.

No retries and no caching. Each failure is classified once and raised as a
CarCheckError carrying the status and message the proxy answers with.
"""

import json
import logging
from typing import Any

import httpx

from carcheck.config import Settings
from carcheck.errors import InvalidPlateError, UpstreamPayloadError, UpstreamStatusError, UpstreamUnavailableError
from carcheck.providers import BaseProvider, DVLAProvider, get_provider
from carcheck.schemas.vehicle import VehicleReport
from carcheck.utils.plates import normalize_plate, validate_plate
from carcheck.utils.text import clean_error_text

logger = logging.getLogger(__name__)


def require_plate(raw: str | None) -> str:
    """Normalize and validate a plate, raising InvalidPlateError if unusable."""
    plate = normalize_plate(raw)
    error = validate_plate(plate)
    if error:
        raise InvalidPlateError(error, details=f"Received '{raw}'")
    return plate


async def fetch_upstream(provider: BaseProvider, plate: str, settings: Settings) -> Any:
    """Call the provider once for ``plate`` and return the decoded JSON body."""
    request = provider.build_request(plate)
    if not provider.api_key:
        logger.warning(f"No API key configured for {provider.name}; upstream will likely reject the request")

    logger.info(f"{provider.name}: {request.method} {request.url} for {plate}")
    try:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
            response = await client.request(
                request.method,
                request.url,
                headers=request.headers,
                params=request.params,
                json=request.json,
            )
    except httpx.HTTPError as e:
        logger.error(f"{provider.name} request failed for {plate}: {e}")
        raise UpstreamUnavailableError(provider.unavailable_message, details=str(e) or type(e).__name__) from e

    logger.info(f"{provider.name}: HTTP {response.status_code} for {plate} ({len(response.content)} bytes)")

    if not response.is_success:
        logger.warning(f"{provider.name} returned HTTP {response.status_code} for {plate}")
        raise UpstreamStatusError(
            provider.not_found_message,
            details=response.text,
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"{provider.name} returned a non-JSON body for {plate}: {e}")
        raise UpstreamPayloadError(
            f"Invalid response from {provider.name}.",
            details=clean_error_text(response.text, settings.error_details_max_length),
        ) from e

    provider.check_payload(payload)
    return payload


async def check_vehicle(raw_plate: str | None, settings: Settings) -> dict:
    """
    Basic DVLA check.

    Returns the flat DVLA object unchanged apart from ``registrationNumber``,
    which falls back to the normalized plate when the upstream omits it.
    """
    plate = require_plate(raw_plate)
    provider = DVLAProvider(settings)
    payload = await fetch_upstream(provider, plate, settings)
    if not isinstance(payload, dict):
        raise UpstreamPayloadError(
            "Invalid response from dvla.",
            details=clean_error_text(json.dumps(payload), settings.error_details_max_length),
        )
    return provider.with_registration(payload, plate)


async def full_report(raw_plate: str | None, settings: Settings) -> VehicleReport:
    """Full report from the configured provider, normalized to a VehicleReport."""
    plate = require_plate(raw_plate)
    provider = get_provider(settings.full_report_provider, settings)
    payload = await fetch_upstream(provider, plate, settings)
    try:
        report = provider.remap(payload, plate)
    except (AttributeError, TypeError, ValueError) as e:
        # pydantic ValidationError is a ValueError
        logger.error(f"{provider.name} payload for {plate} could not be remapped: {e}")
        raise UpstreamPayloadError(
            f"Invalid response from {provider.name}.",
            details=clean_error_text(str(e), settings.error_details_max_length),
        ) from e
    if settings.include_raw:
        report = report.model_copy(update={"raw": payload})
    logger.info(f"{provider.name}: report for {report.registration} built")
    return report
