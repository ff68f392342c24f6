"""
Service factory for the Sirene UI.

This module provides the get_sirene_service() factory function that returns
the appropriate SireneService implementation based on configuration.

Available Implementations:
- demo: Bundled fixture payloads (no network, no INSEE key required)
- impl: Live Géoplateforme, BAN and INSEE SIRENE APIs

The service is cached at the module level, so the same instance is reused
across all requests. Configure via the SIRENE_UI_SERVICE environment variable.
"""

from functools import cache
from typing import Callable, Dict

from sirene_ui.config import get_settings
from sirene_ui.lib import logs
from sirene_ui.services.sirene_service import SireneService
from sirene_ui.services.sirene_service_demo import DemoSireneService
from sirene_ui.services.sirene_service_impl import SireneServiceImpl

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], SireneService]] = {
    "demo": lambda: DemoSireneService(),
    "impl": lambda: SireneServiceImpl(),
}


@cache
def get_sirene_service(kind: str | None = None) -> SireneService:
    """Return the configured service implementation."""
    resolved_kind = (kind or get_settings().service_kind).lower()
    LOG.info("get_sirene_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown sirene service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DemoSireneService",
    "SireneService",
    "SireneServiceImpl",
    "get_sirene_service",
]
