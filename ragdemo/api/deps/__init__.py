"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_collection_inspector,
    get_orchestrator,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_collection_inspector",
    "get_orchestrator",
    "get_service_cache",
    "get_settings_dependency",
]
