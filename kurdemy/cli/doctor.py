"""Doctor command for checking the host environment."""

import sys

import click

from kurdemy.configs.system import get_settings
from kurdemy.io import detect_node_version
from kurdemy.logging import CONSOLE, LOGGER
from kurdemy.validators import validate_environment_setup


@click.command()
def doctor_command():
    """Check that the tools needed by a generated project are available."""
    settings = get_settings()
    version = detect_node_version()
    LOGGER.debug("Detected Node.js version: %s", version)

    result = validate_environment_setup(version, minimum_major=settings.minimum_node_major)
    if not result.valid:
        for requirement in result.requirements:
            CONSOLE.print(f"[red]✗[/red] {requirement}")
        sys.exit(1)

    CONSOLE.print(f"[green]✓[/green] Node.js {version} satisfies the minimum version ({settings.minimum_node_major})")
