"""
Base provider interface for upstream vehicle-data APIs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from carcheck.config import Settings
from carcheck.schemas.vehicle import VehicleReport


@dataclass
class UpstreamRequest:
    """One outbound HTTP call, fully described."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] | None = None
    json: dict[str, Any] | None = None


class BaseProvider(ABC):
    """Base class for all upstream vehicle-data providers."""

    name: str = ""
    not_found_message: str = "Vehicle not found or invalid registration."
    unavailable_message: str = "Server error while contacting the vehicle data provider."

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    @abstractmethod
    def api_key(self) -> str:
        """The secret key injected into every request."""

    @abstractmethod
    def build_request(self, plate: str) -> UpstreamRequest:
        """Describe the upstream request for a normalized plate."""

    @abstractmethod
    def remap(self, payload: Any, plate: str) -> VehicleReport:
        """
        Normalize the provider's JSON into a VehicleReport.

        ``plate`` is the normalized input, used wherever the provider omits
        the registration.
        """

    def check_payload(self, payload: Any) -> None:
        """
        Hook for providers that signal failure inside a 2xx body.
        Raise a CarCheckError to reject the payload.
        """
        return None
