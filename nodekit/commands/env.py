"""NodeKit CLI - Env command"""

import click

from nodekit.base import ServiceCommand
from nodekit.commands.options import service_options


class EnvCommand(ServiceCommand):
    """Print the environment a service's install script will see."""

    def execute(self) -> None:
        # stdout carries the rendered environment only
        logger = self.init_logger(self.service_name, "env", quiet=True)

        logger.step(f"Loading {self.config_path}")
        command = self.build_command()
        command.check()

        logger.step("Deriving environment")
        env = command.env()
        logger.success(f"{len(env)} environment variable(s)")

        if self.json_output:
            self.output_json({"service": self.service_name, "env": env.as_dict()})
        else:
            click.echo(env.render())


@click.command(name="env")
@service_options
def env(service, config, verbose, json_output, log_dir):
    """
    Show the remote environment for a service

    \b
    Example:
      nodekit env watchtower -c watchtower.yml
    """
    cmd = EnvCommand(
        service, config, verbose=verbose, json_output=json_output, log_dir=log_dir
    )
    cmd.run()
