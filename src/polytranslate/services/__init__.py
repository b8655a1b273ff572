"""Translation service registry, secret validation and display ordering."""

from .registry import SERVICE_TYPES, SERVICES, ServiceDescriptor, get_service, index_services
from .sorting import (
    BASELINE_PRIORITY,
    DEFAULT_PRIORITIES,
    effective_priority,
    get_sorted_services_with_priorities,
)
from .validation import (
    SecretPart,
    ValidationResult,
    ValidatorKind,
    ValidatorSpec,
    check_secret,
)

__all__ = [
    "BASELINE_PRIORITY",
    "DEFAULT_PRIORITIES",
    "SERVICES",
    "SERVICE_TYPES",
    "SecretPart",
    "ServiceDescriptor",
    "ValidationResult",
    "ValidatorKind",
    "ValidatorSpec",
    "check_secret",
    "effective_priority",
    "get_service",
    "get_sorted_services_with_priorities",
    "index_services",
]
