"""
Install pipeline

Drives a Command through Unchecked -> Checked -> EnvDerived -> PayloadPopulated.
Each stage runs once; the first failure halts the pipeline and is re-raised
unchanged. The payload is only handed back when every stage succeeded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from nodekit.logger import InstallLogger

from .command import Command
from .env_builder import EnvBuilder
from .payload import Payload


class Stage(Enum):
    """Progress of a command through the pipeline."""

    UNCHECKED = "unchecked"
    CHECKED = "checked"
    ENV_DERIVED = "env_derived"
    PAYLOAD_POPULATED = "payload_populated"


@dataclass
class PreparedInstall:
    """Environment and payload ready for the external runner."""

    env: EnvBuilder
    payload: Payload

    def __repr__(self) -> str:
        return f"PreparedInstall(env={len(self.env)} vars, payload={self.payload.paths()})"


class InstallPipeline:
    """Run one install cycle for a single Command."""

    def __init__(self, command: Command, logger: Optional[InstallLogger] = None):
        self.command = command
        self.logger = logger
        self.stage = Stage.UNCHECKED

    def run(self) -> PreparedInstall:
        """
        Check the command, derive its environment and build its payload.

        Returns:
            PreparedInstall with the environment and a fully populated payload

        Raises:
            Whatever the failing stage raised, unchanged
        """
        if self.stage is not Stage.UNCHECKED:
            raise RuntimeError(f"Pipeline already ran (stage: {self.stage.value})")

        name = type(self.command).__name__

        try:
            self._step(f"Checking {name}")
            self.command.check()
            self.stage = Stage.CHECKED

            self._step("Deriving environment")
            env = self.command.env()
            self.stage = Stage.ENV_DERIVED
            self._success(f"{len(env)} environment variable(s): {', '.join(env.as_dict())}")

            self._step("Assembling payload")
            payload = Payload()
            self.command.add_to_payload(payload)
            self.stage = Stage.PAYLOAD_POPULATED
            self._success(f"{len(payload)} artifact(s): {', '.join(payload.paths())}")
        except Exception as e:
            if self.logger:
                self.logger.log_error(
                    f"{type(e).__name__}: {e}",
                    context=f"stage: {self.stage.value}",
                    console_output=False,
                )
            raise

        return PreparedInstall(env=env, payload=payload)

    def _step(self, message: str) -> None:
        if self.logger:
            self.logger.step(message)

    def _success(self, message: str) -> None:
        if self.logger:
            self.logger.success(message)
