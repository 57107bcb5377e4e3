"""
NodeKit CLI Base Command Classes

Abstract base classes for consistent command structure.
"""

from .base_command import BaseCommand
from .service_command import ServiceCommand

__all__ = [
    "BaseCommand",
    "ServiceCommand",
]
