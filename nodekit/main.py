#!/usr/bin/env python3
"""NodeKit CLI - Main entry point"""

import sys

from rich.console import Console

# Rich-Click: CLI help with colors
import rich_click as click

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = False
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.MAX_WIDTH = 100

# COMMANDS / OPTIONS
click.rich_click.STYLE_COMMAND = "bold cyan"
click.rich_click.STYLE_OPTION = "bold magenta"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_ARGUMENT = "bold yellow"

# HEADERS
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_USAGE = "bold yellow"
click.rich_click.STYLE_USAGE_COMMAND = "bold cyan"

# REQUIRED / DEFAULTS
click.rich_click.STYLE_REQUIRED_SHORT = "bold red"
click.rich_click.STYLE_REQUIRED_LONG = "bold red"
click.rich_click.STYLE_OPTION_DEFAULT = "dim cyan"

click.rich_click.ERRORS_EPILOGUE = ""

from nodekit import __version__
from nodekit.commands.check import check
from nodekit.commands.env import env
from nodekit.commands.install import install
from nodekit.commands.services import services

console = Console()

BANNER = """
[bold cyan]╔═══════════════════════════════════════════════════════════╗[/bold cyan]
[bold cyan]║[/bold cyan]  [bold white]NodeKit[/bold white] - validator-node install payloads              [bold cyan]║[/bold cyan]
[bold cyan]╚═══════════════════════════════════════════════════════════╝[/bold cyan]
"""


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="nodekit")
@click.pass_context
def cli(ctx):
    """
    Build installation payloads for Solana validator-node services.

    A payload is the set of files (config, install script, keypairs) plus the
    environment an external runner needs to install a service on a host.
    """
    if ctx.invoked_subcommand is None:
        console.print(BANNER)
        click.echo(ctx.get_help())


cli.add_command(services)
cli.add_command(check)
cli.add_command(env)
cli.add_command(install)


def main():
    """Console script entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n\n[yellow]⚠️  Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
