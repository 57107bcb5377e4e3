"""
NodeKit Services

Installable validator-node services and the registry that selects them by name.
"""

from .registry import ServiceRegistry, ServiceType, service_registry

__all__ = [
    "ServiceRegistry",
    "ServiceType",
    "service_registry",
]
