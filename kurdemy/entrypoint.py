"""Main CLI entry point for the kurdemy tool."""


import click

from kurdemy.cli.check import check_command
from kurdemy.cli.configure import configure_command
from kurdemy.cli.create import create_command
from kurdemy.cli.doctor import doctor_command
from kurdemy.logging import configure_logging


@click.group()
@click.version_option(package_name="kurdemy")
@click.option("--verbose", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Kurdemy - choose and validate a fullstack project configuration."""
    configure_logging(verbose)


# Register subcommands
cli.add_command(create_command, name="create")
cli.add_command(check_command, name="check")
cli.add_command(doctor_command, name="doctor")
cli.add_command(configure_command, name="configure")


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
