"""Configuration command for setting user defaults."""

import sys

import click
from pydantic import ValidationError
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from kurdemy.configs.system import KurdemySettings
from kurdemy.logging import CONSOLE
from kurdemy.options import PackageManager, StackSchema, choice_values


@click.command()
@click.option(
    "--package-manager",
    type=click.Choice(choice_values(PackageManager)),
    help="Default package manager (will prompt if not provided)",
)
@click.option(
    "--schema",
    "schema_name",
    type=click.Choice(choice_values(StackSchema)),
    help="Default option set (will prompt if not provided)",
)
@click.option(
    "--recommendations/--no-recommendations",
    default=None,
    help="Show recommendations after a configuration is accepted",
)
def configure_command(package_manager: str | None, schema_name: str | None, recommendations: bool | None):
    """Configure defaults used when creating a new stack."""
    CONSOLE.print(Panel.fit(
        "[bold cyan]Kurdemy Configuration[/bold cyan]\n"
        "Set up your preferred defaults",
        border_style="cyan"
    ))

    try:
        settings = KurdemySettings.load_from_disk()
        CONSOLE.print("\n[dim]Loading existing configuration...[/dim]")
    except ValidationError as e:
        CONSOLE.print(f"\n[yellow]Ignoring invalid configuration: {e.error_count()} error(s)[/yellow]")
        settings = KurdemySettings.model_construct()

    # Only prompt for what was not given on the command line
    interactive = package_manager is None and schema_name is None and recommendations is None

    if package_manager is None and interactive:
        package_manager = Prompt.ask(
            "Default package manager",
            choices=list(choice_values(PackageManager)),
            default=settings.default_package_manager.value,
            console=CONSOLE,
        )
    if schema_name is None and interactive:
        schema_name = Prompt.ask(
            "Default option set",
            choices=list(choice_values(StackSchema)),
            default=settings.schema_variant.value,
            console=CONSOLE,
        )
    if recommendations is None and interactive:
        recommendations = Confirm.ask(
            "Show recommendations after validation?",
            default=settings.show_recommendations,
            console=CONSOLE,
        )

    updates = {}
    if package_manager is not None:
        updates["default_package_manager"] = PackageManager(package_manager)
    if schema_name is not None:
        updates["schema_variant"] = StackSchema(schema_name)
    if recommendations is not None:
        updates["show_recommendations"] = recommendations
    settings = settings.model_copy(update=updates)

    try:
        config_path = settings.save_to_disk()
    except OSError as e:
        CONSOLE.print(f"\n[red]Error saving configuration: {e}[/red]")
        sys.exit(1)

    CONSOLE.print("\n[bold green]✅ Configuration saved successfully![/bold green]")
    CONSOLE.print(f"[dim]Configuration file: {config_path}[/dim]")

    CONSOLE.print("\n[bold]Configured settings:[/bold]")
    CONSOLE.print(f"  • Package manager: {settings.default_package_manager.value}")
    CONSOLE.print(f"  • Option set: {settings.schema_variant.value}")
    CONSOLE.print(f"  • Recommendations: {'on' if settings.show_recommendations else 'off'}")
