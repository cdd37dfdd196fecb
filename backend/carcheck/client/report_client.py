"""
HTTP client for the CarCheck proxy.

Mirrors the browser form: each lookup goes idle -> loading -> success or
error, and an empty plate never reaches the network.
"""

import logging
from urllib.parse import quote
from dataclasses import dataclass
from typing import Any

import httpx

from carcheck.utils.plates import normalize_plate

logger = logging.getLogger(__name__)

EMPTY_PLATE_MESSAGE = "Please enter a registration number."


class LookupFailed(Exception):
    """The proxy answered with an error body."""


@dataclass
class ReportState:
    """UI state for one report session."""

    plate: str = ""
    loading: bool = False
    error: str | None = None
    basic: dict[str, Any] | None = None
    full: dict[str, Any] | None = None


class ReportClient:
    """Calls /api/check and /api/full and records the outcome in ``state``."""

    def __init__(self, base_url: str = "http://localhost:3001", http_client: httpx.AsyncClient | None = None):
        self.base_url = base_url.rstrip("/")
        self.state = ReportState()
        self._http_client = http_client

    async def check(self, plate: str | None) -> dict[str, Any] | None:
        """Basic DVLA check. Returns the result, or None on error."""
        return await self._lookup("check", plate)

    async def full(self, plate: str | None) -> dict[str, Any] | None:
        """Full report. Returns the result, or None on error."""
        return await self._lookup("full", plate)

    async def lookup_all(self, plate: str | None) -> ReportState:
        """Run the basic check, then the full report if the check succeeded."""
        if await self.check(plate) is not None:
            await self.full(plate)
        return self.state

    async def _lookup(self, kind: str, raw_plate: str | None) -> dict[str, Any] | None:
        slot = "basic" if kind == "check" else "full"
        state = self.state
        state.error = None
        setattr(state, slot, None)

        plate = normalize_plate(raw_plate)
        state.plate = plate
        if not plate:
            state.error = EMPTY_PLATE_MESSAGE
            return None

        state.loading = True
        try:
            data = await self._get(f"/api/{kind}/{quote(plate, safe='')}")
        except LookupFailed as e:
            state.error = str(e)
            return None
        except httpx.HTTPError as e:
            logger.error(f"Lookup {kind} for {plate} failed: {e}")
            state.error = str(e) or "Something went wrong"
            return None
        finally:
            state.loading = False

        setattr(state, slot, data)
        return data

    async def _get(self, path: str) -> dict[str, Any]:
        if self._http_client is not None:
            response = await self._http_client.get(f"{self.base_url}{path}")
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(f"{self.base_url}{path}")

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success:
            message = body.get("error") if isinstance(body, dict) else None
            raise LookupFailed(message or "Lookup failed")
        if not isinstance(body, dict):
            raise LookupFailed("Lookup failed")
        return body
