"""
Service Command Base Class

Base class for commands that act on one service configuration file.
"""

from pathlib import Path
from typing import Optional, Union

from .base_command import BaseCommand
from nodekit.models import ConfigModel
from nodekit.runner import Command
from nodekit.services import ServiceRegistry, service_registry
from nodekit.utils import load_config_file


class ServiceCommand(BaseCommand):
    """
    Base class for service-specific commands.

    Provides:
    - Config file loading
    - Model validation through the service registry
    - Install command construction
    """

    def __init__(
        self,
        service_name: str,
        config_path: Union[str, Path],
        verbose: bool = False,
        json_output: bool = False,
        log_dir: Union[str, Path] = "logs",
        registry: Optional[ServiceRegistry] = None,
    ):
        super().__init__(verbose=verbose, json_output=json_output, log_dir=log_dir)
        self.service_name = service_name
        self.config_path = Path(config_path)
        self.registry = registry or service_registry

    def load_service(self) -> ConfigModel:
        """Load and validate the service configuration."""
        data = load_config_file(self.config_path)
        return self.registry.load(self.service_name, data)

    def build_command(self) -> Command:
        """Load the configuration and return its install command."""
        return self.load_service().install()
