"""
NodeKit Exception Hierarchy

Exceptions raised by configuration loading, command checks and payload assembly.
Errors coming from encoders, template rendering or bundled asset access are not
wrapped here: they propagate to the caller unchanged.
"""

from typing import Optional


class NodeKitError(Exception):
    """Base exception for all NodeKit errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class ConfigurationError(NodeKitError):
    """Raised when a service configuration is invalid or cannot be installed."""

    pass


class PayloadError(NodeKitError):
    """Raised when an artifact cannot be placed in a payload."""

    pass


class SecretLeakError(NodeKitError):
    """Raised when secret material is handed to a non-secret surface."""

    pass


class ServiceNotFoundError(ConfigurationError):
    """Raised when a service name is not registered."""

    def __init__(self, service_name: str, available_services: list[str]):
        self.service_name = service_name
        self.available_services = available_services
        message = f"Service '{service_name}' is not registered"
        context = f"Available services: {', '.join(available_services)}"
        super().__init__(message, context)
