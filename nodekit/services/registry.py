"""
Service Registry - installable services keyed by name.

Maps a service name from a deployment file (``firedancer``, ``watchtower``)
to the configuration model that validates it and produces its Command.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import ValidationError

from nodekit.exceptions import ConfigurationError, ServiceNotFoundError
from nodekit.models import ConfigModel
from nodekit.runner import AssetResolver, Command

from .firedancer import Firedancer
from .watchtower import Watchtower


@dataclass
class ServiceType:
    """Registration entry for an installable service."""

    name: str
    model: Type[ConfigModel]
    description: str = ""


class ServiceRegistry:
    """
    Registry for installable services.

    Every registered model must provide ``install(assets=None) -> Command``.
    """

    def __init__(self):
        self._types: Dict[str, ServiceType] = {}
        self._register_builtin_types()

    def register(self, service_type: ServiceType) -> None:
        """Register a new service type."""
        self._types[service_type.name] = service_type

    def get(self, name: str) -> ServiceType:
        """
        Get a service type.

        Raises:
            ServiceNotFoundError: If the service is not registered
        """
        if name not in self._types:
            raise ServiceNotFoundError(name, self.list_types())
        return self._types[name]

    def list_types(self) -> list[str]:
        """List all registered service names."""
        return list(self._types.keys())

    def load(self, name: str, data: Optional[Mapping[str, Any]]) -> ConfigModel:
        """
        Validate raw configuration data into the service's model.

        Args:
            name: Service name
            data: Parsed configuration mapping (camelCase keys)

        Raises:
            ServiceNotFoundError: If the service is not registered
            ConfigurationError: If the data does not match the model
        """
        service_type = self.get(name)
        try:
            return service_type.model.model_validate(data or {})
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid {name} configuration ({e.error_count()} error(s))",
                context=_summarize(e),
            ) from e

    def install(
        self,
        name: str,
        data: Optional[Mapping[str, Any]],
        assets: Optional[AssetResolver] = None,
    ) -> Command:
        """Load a configuration and return its install command."""
        return self.load(name, data).install(assets=assets)

    def _register_builtin_types(self) -> None:
        """Register the built-in services."""
        self.register(
            ServiceType(
                name="firedancer",
                model=Firedancer,
                description="Firedancer validator client (config.toml, keypairs, install script)",
            )
        )
        self.register(
            ServiceType(
                name="watchtower",
                model=Watchtower,
                description="solana-watchtower monitoring and alerting sidecar",
            )
        )


def _summarize(error: ValidationError) -> str:
    """One line per validation error; input values are left out so secrets never show."""
    lines = []
    for item in error.errors(include_input=False):
        location = ".".join(str(part) for part in item["loc"])
        lines.append(f"{location}: {item['msg']}")
    return "; ".join(lines)


# Global registry instance
service_registry = ServiceRegistry()
