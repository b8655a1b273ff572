"""Priority ordering of registered services for display."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from .registry import SERVICE_TYPES, SERVICES, ServiceDescriptor, ServiceType

logger = logging.getLogger(__name__)

CUSTOM_PRIORITY = 20
BASELINE_PRIORITY = 100
CONFIGURED_ENDPOINT_PRIORITY = 110
FREE_PRIORITY = 120

DEFAULT_PRIORITIES: Dict[str, int] = {
    # user-defined endpoints
    "customgpt1": CUSTOM_PRIORITY,
    "customgpt2": CUSTOM_PRIORITY,
    "customgpt3": CUSTOM_PRIORITY,
    # free, no configuration needed
    "google": FREE_PRIORITY,
    "googleapi": FREE_PRIORITY,
    "cnki": FREE_PRIORITY,
    "haici": FREE_PRIORITY,
    "youdao": FREE_PRIORITY,
    "bing": FREE_PRIORITY,
    "deeplx": FREE_PRIORITY,
    # need a custom endpoint to be configured
    "deeplcustom": CONFIGURED_ENDPOINT_PRIORITY,
    "mtranserver": CONFIGURED_ENDPOINT_PRIORITY,
    "libretranslate": CONFIGURED_ENDPOINT_PRIORITY,
    "pot": CONFIGURED_ENDPOINT_PRIORITY,
}


def effective_priority(service_id: str, priority_map: Optional[Mapping[str, Optional[float]]] = None) -> float:
    """Override from ``priority_map``, else the default tier, else the baseline."""
    override = (priority_map or {}).get(service_id)
    if override is not None:
        return override
    return DEFAULT_PRIORITIES.get(service_id, BASELINE_PRIORITY)


def get_sorted_services_with_priorities(
    service_type: ServiceType,
    priority_map: Optional[Mapping[str, Optional[float]]] = None,
    services: Sequence[ServiceDescriptor] = SERVICES,
) -> List[ServiceDescriptor]:
    """Return services of ``service_type`` by descending priority, then by id."""
    if service_type not in SERVICE_TYPES:
        raise ValueError(f"Unknown service type: {service_type}")
    priority_map = priority_map or {}
    known_ids = {service.id for service in services}
    unknown = sorted(set(priority_map) - known_ids)
    if unknown:
        logger.warning("Ignoring priorities for unknown services: %s", ", ".join(unknown))
    candidates = [service for service in services if service.type == service_type]
    return sorted(
        candidates,
        key=lambda service: (-effective_priority(service.id, priority_map), service.id.casefold(), service.id),
    )
