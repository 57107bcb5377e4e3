"""NodeKit CLI - Install command"""

from pathlib import Path
from typing import Optional

import click

from nodekit.base import ServiceCommand
from nodekit.commands.options import service_options
from nodekit.runner import InstallPipeline, PreparedInstall

PAYLOAD_DIR = "payload"
ENV_FILE = "env"


class InstallPayloadCommand(ServiceCommand):
    """
    Prepare an install payload for the external runner.

    Output layout:
        <output>/payload/...   every artifact, with its file mode
        <output>/env           rendered environment for the install script
    """

    def __init__(self, *args, output_dir: str, tar_path: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.output_dir = Path(output_dir)
        self.tar_path = Path(tar_path) if tar_path else None

    def execute(self) -> None:
        logger = self.init_logger(self.service_name, "install")

        logger.step(f"Loading {self.config_path}")
        command = self.build_command()
        logger.success(f"Loaded {self.service_name} configuration")

        prepared = InstallPipeline(command, logger=logger).run()

        logger.step(f"Writing payload to {self.output_dir}")
        written = self._write(prepared)
        logger.success(f"{len(written)} file(s) written")

        if self.tar_path:
            with open(self.tar_path, "wb") as f:
                prepared.payload.write_tar(f)
            logger.success(f"Tarball written to {self.tar_path}")

        if self.json_output:
            self.output_json(
                {
                    "service": self.service_name,
                    "output": str(self.output_dir),
                    "artifacts": prepared.payload.paths(),
                    "env": list(prepared.env.as_dict()),
                    "tarball": str(self.tar_path) if self.tar_path else None,
                }
            )
        else:
            self.print_success(
                f"{self.service_name} payload ready: {', '.join(prepared.payload.paths())}"
            )

    def _write(self, prepared: PreparedInstall) -> list[Path]:
        written = prepared.payload.write_to(self.output_dir / PAYLOAD_DIR)

        env_path = self.output_dir / ENV_FILE
        env_path.write_text(prepared.env.render() + "\n")
        env_path.chmod(0o600)
        written.append(env_path)

        return written


@click.command(name="install")
@service_options
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory to write the payload into",
)
@click.option(
    "--tar",
    "tar_path",
    type=click.Path(dir_okay=False),
    help="Also write a gzip tarball of the payload",
)
def install(service, config, verbose, json_output, log_dir, output, tar_path):
    """
    Build the install payload for a service

    \b
    Example:
      nodekit install firedancer -c firedancer.yml -o build/firedancer
      nodekit install watchtower -c watchtower.yml -o build/wt --tar wt.tar.gz
    """
    cmd = InstallPayloadCommand(
        service,
        config,
        verbose=verbose,
        json_output=json_output,
        log_dir=log_dir,
        output_dir=output,
        tar_path=tar_path,
    )
    cmd.run()
