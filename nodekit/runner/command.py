"""
Command contract

Every installable service produces a Command. Callers drive it in a fixed
order: ``check`` (fail fast on invalid configuration), ``env`` (variables the
remote script sees), ``add_to_payload`` (artifacts). The contract does not
enforce that order itself; ``InstallPipeline`` does.
"""

from abc import ABC, abstractmethod

from .env_builder import EnvBuilder
from .payload import Payload


class Command(ABC):
    """Unit of installation work for one service configuration."""

    @abstractmethod
    def check(self) -> None:
        """
        Validate the wrapped configuration without mutating it or doing I/O.

        Raises:
            ConfigurationError: If the configuration cannot be installed as-is
        """
        pass

    @abstractmethod
    def env(self) -> EnvBuilder:
        """Derive a fresh EnvBuilder for the remote execution step."""
        pass

    @abstractmethod
    def add_to_payload(self, payload: Payload) -> None:
        """
        Write this command's artifacts into ``payload``.

        Encoder, template and asset errors propagate unchanged.
        """
        pass
