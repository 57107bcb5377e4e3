"""Shared click options for service commands"""

import click

_SERVICE_OPTIONS = [
    click.argument("service"),
    click.option(
        "--config",
        "-c",
        required=True,
        type=click.Path(dir_okay=False),
        help="Service configuration file (YAML)",
    ),
    click.option("--verbose", "-v", is_flag=True, help="Show all output"),
    click.option("--json", "json_output", is_flag=True, help="Output in JSON format"),
    click.option(
        "--log-dir",
        envvar="NODEKIT_LOG_DIR",
        default="logs",
        show_default=True,
        type=click.Path(file_okay=False),
        help="Directory for run logs",
    ),
]


def service_options(func):
    """Attach the SERVICE argument and the options every service command takes."""
    for decorator in reversed(_SERVICE_OPTIONS):
        func = decorator(func)
    return func
