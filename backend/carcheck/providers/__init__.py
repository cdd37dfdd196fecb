"""
Upstream vehicle-data providers.
"""

from carcheck.config import Settings
from carcheck.providers.base import BaseProvider, UpstreamRequest
from carcheck.providers.dvla import DVLAProvider
from carcheck.providers.mot import MOTHistoryProvider
from carcheck.providers.oneauto import OneAutoProvider
from carcheck.providers.rapidcarcheck import RapidCarCheckProvider

PROVIDERS: dict[str, type[BaseProvider]] = {
    DVLAProvider.name: DVLAProvider,
    OneAutoProvider.name: OneAutoProvider,
    RapidCarCheckProvider.name: RapidCarCheckProvider,
    MOTHistoryProvider.name: MOTHistoryProvider,
}


def get_provider(name: str, settings: Settings) -> BaseProvider:
    """Instantiate a provider by name."""
    try:
        provider_cls = PROVIDERS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown provider '{name}'. Choose one of: {', '.join(sorted(PROVIDERS))}") from None
    return provider_cls(settings)


__all__ = [
    "BaseProvider",
    "UpstreamRequest",
    "DVLAProvider",
    "OneAutoProvider",
    "RapidCarCheckProvider",
    "MOTHistoryProvider",
    "PROVIDERS",
    "get_provider",
]
