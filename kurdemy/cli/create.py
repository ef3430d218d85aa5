"""Create command: collect, validate and summarize a stack configuration."""

import sys
from pathlib import Path

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from kurdemy.collector import collect_options, collect_project_name
from kurdemy.configs.project import StackConfig
from kurdemy.configs.system import KurdemySettings, get_settings
from kurdemy.io import write_options_file
from kurdemy.logging import CONSOLE, LOGGER
from kurdemy.options import StackSchema, choice_values
from kurdemy.validators import (
    get_recommendations,
    validate_options,
    validate_project_name,
    validate_stack_compatibility,
)


def print_errors(title: str, errors: list[str]) -> None:
    """Show validation errors one per line in a red panel."""
    CONSOLE.print(Panel(
        "\n".join(escape(error) for error in errors),
        title=f"[bold red]{escape(title)}[/bold red]",
        border_style="red",
        expand=False,
    ))


def create_summary_table(config: StackConfig) -> Table:
    """Create a table listing every resolved choice."""
    table = Table(
        show_header=True,
        header_style="bold cyan",
        title=f"Stack for {config.project_name}",
        title_style="bold",
        expand=False,
    )
    table.add_column("Option", style="cyan", width=18)
    table.add_column("Choice", width=24)

    table.add_row("Frontend", config.frontend.value)
    if config.database is not None:
        table.add_row("Database", config.database.value)
    if config.orm is not None:
        table.add_row("ORM", config.orm.value)
    for label, enabled in (("tRPC", config.trpc), ("NextAuth.js", config.auth), ("Tailwind CSS", config.tailwind)):
        table.add_row(label, "[green]yes[/green]" if enabled else "[dim]no[/dim]")
    table.add_row("Package manager", config.package_manager.value)
    return table


def print_advice(config: StackConfig, settings: KurdemySettings) -> None:
    """Print stack warnings and, unless disabled, recommendations."""
    compatibility = validate_stack_compatibility(config)
    for warning in compatibility.warnings:
        CONSOLE.print(f"[yellow]⚠ {warning}[/yellow]")

    if not settings.show_recommendations:
        return

    recommendations = get_recommendations(config)
    if recommendations:
        CONSOLE.print("\n[bold]Recommendations:[/bold]")
        for recommendation in recommendations:
            CONSOLE.print(f"  • {recommendation}")


@click.command()
@click.argument("project_name", required=False)
@click.option("--frontend", help="Frontend framework (nextjs or react)")
@click.option("--database", help="Database (legacy schema only)")
@click.option("--orm", help="ORM (legacy schema only)")
@click.option("--trpc/--no-trpc", default=None, help="Use tRPC for type-safe APIs")
@click.option("--auth/--no-auth", default=None, help="Include NextAuth.js (requires Next.js)")
@click.option("--tailwind/--no-tailwind", default=None, help="Use Tailwind CSS")
@click.option("--package-manager", help="npm, yarn or pnpm")
@click.option(
    "--schema",
    "schema_name",
    type=click.Choice(choice_values(StackSchema), case_sensitive=False),
    default=None,
    help="Option set to use (defaults to the configured schema)",
)
@click.option("--yes", "-y", is_flag=True, help="Use defaults instead of prompting")
@click.option(
    "--save",
    "save_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the accepted configuration to a TOML file",
)
def create_command(
    project_name: str | None,
    frontend: str | None,
    database: str | None,
    orm: str | None,
    trpc: bool | None,
    auth: bool | None,
    tailwind: bool | None,
    package_manager: str | None,
    schema_name: str | None,
    yes: bool,
    save_path: Path | None,
):
    """Choose a stack for a new project and validate it."""
    settings = get_settings()
    schema = StackSchema(schema_name.lower()) if schema_name else settings.schema_variant
    interactive = not yes
    LOGGER.debug("Creating configuration with schema=%s interactive=%s", schema.value, interactive)

    CONSOLE.print(Panel.fit(
        "[bold magenta]Kurdemy Stack Generator[/bold magenta]\n"
        "Create modern fullstack applications with ease!",
        border_style="magenta"
    ))

    name = collect_project_name(project_name, interactive=interactive)
    name_result = validate_project_name(name)
    if not name_result.valid:
        print_errors("Invalid project name", [name_result.error])
        sys.exit(1)

    provided = {
        "frontend": frontend,
        "database": database,
        "orm": orm,
        "trpc": trpc,
        "auth": auth,
        "tailwind": tailwind,
        "package_manager": package_manager,
    }
    options = collect_options(provided, schema=schema, settings=settings, interactive=interactive)

    result = validate_options(options, schema=schema)
    if not result.valid:
        print_errors("Configuration error", result.errors)
        sys.exit(1)

    config = StackConfig.model_validate({"project_name": name, **options})

    CONSOLE.print()
    CONSOLE.print(create_summary_table(config))
    CONSOLE.print()
    print_advice(config, settings)

    if save_path is not None:
        try:
            written = write_options_file(save_path, config.to_options())
        except OSError as e:
            CONSOLE.print(f"[red]Error saving configuration: {escape(str(e))}[/red]")
            sys.exit(1)
        CONSOLE.print(f"\n[green]✓[/green] Configuration saved to {escape(str(written))}")

    CONSOLE.print("\n[bold green]✅ Configuration is valid![/bold green]")
