"""NodeKit CLI - Services command"""

import click
from rich.table import Table

from nodekit.base import BaseCommand
from nodekit.services import service_registry


class ServicesCommand(BaseCommand):
    """List installable services."""

    def execute(self) -> None:
        types = [service_registry.get(name) for name in service_registry.list_types()]

        if self.json_output:
            self.output_json(
                {
                    "services": [
                        {"name": t.name, "description": t.description} for t in types
                    ]
                }
            )
            return

        table = Table(title="Installable services", title_justify="left")
        table.add_column("Service", style="bold cyan")
        table.add_column("Description")
        for t in types:
            table.add_row(t.name, t.description)

        self.console.print(table)


@click.command(name="services")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
def services(json_output):
    """
    List installable services

    \b
    Example:
      nodekit services
    """
    cmd = ServicesCommand(json_output=json_output)
    cmd.run()
