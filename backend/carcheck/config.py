"""
Configuration management for the CarCheck backend.
Uses pydantic-settings for environment variable handling.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from carcheck.schemas.vehicle import ProviderName

STATIC_DIR = Path(__file__).parent / "static"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # API Configuration
    api_title: str = "CarCheck API"
    api_version: str = "1.0.0"
    service_name: str = "car-check-server"
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origin: str = "http://localhost:5173"  # Vite dev server
    static_dir: Path = STATIC_DIR

    # Upstream API keys
    dvla_api_key: str = ""
    rapidcarcheck_key: str = ""
    oneauto_api_key: str = ""
    mot_api_key: str = ""

    # Upstream endpoints
    dvla_url: str = "https://driver-vehicle-licensing.api.gov.uk/vehicle-enquiry/v1/vehicles"
    oneauto_url: str = "https://api.oneautoapi.com/driverightdata/vehiclehistoryv3/"
    rapidcarcheck_url: str = "https://www.rapidcarcheck.co.uk/api/"
    mot_url: str = "https://beta.check-mot.service.gov.uk/trade/vehicles/mot-tests"

    # Full report behaviour
    full_report_provider: ProviderName = "oneauto"
    include_raw: bool = False  # attach the upstream payload to /api/full responses

    # Outbound requests (None = wait indefinitely)
    request_timeout: float | None = None
    error_details_max_length: int = 300


@lru_cache
def get_settings() -> Settings:
    """Build the settings once per process."""
    return Settings()
