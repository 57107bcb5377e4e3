"""NodeKit CLI - Check command"""

import click

from nodekit.base import ServiceCommand
from nodekit.commands.options import service_options


class CheckCommand(ServiceCommand):
    """Validate a service configuration without building a payload."""

    def execute(self) -> None:
        logger = self.init_logger(self.service_name, "check")

        logger.step(f"Loading {self.config_path}")
        command = self.build_command()
        logger.success("Configuration parsed")

        logger.step("Checking configuration")
        command.check()
        logger.success("Configuration is installable")

        if self.json_output:
            self.output_json({"service": self.service_name, "valid": True})
        else:
            self.print_success(f"{self.service_name} configuration is valid")


@click.command(name="check")
@service_options
def check(service, config, verbose, json_output, log_dir):
    """
    Validate a service configuration

    \b
    Example:
      nodekit check firedancer -c firedancer.yml
    """
    cmd = CheckCommand(
        service, config, verbose=verbose, json_output=json_output, log_dir=log_dir
    )
    cmd.run()
