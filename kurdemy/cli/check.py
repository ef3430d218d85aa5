"""Check command for validating a saved options file."""

import sys
from pathlib import Path

import click
from rich.markup import escape

from kurdemy.cli.create import print_errors
from kurdemy.io import OptionsFileError, load_options_file
from kurdemy.logging import CONSOLE
from kurdemy.options import StackSchema, choice_values
from kurdemy.validators import validate_options, validate_project_name


@click.command()
@click.argument("options_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--schema",
    "schema_name",
    type=click.Choice(choice_values(StackSchema), case_sensitive=False),
    default=None,
    help="Option set to check against (inferred from the file when omitted)",
)
def check_command(options_file: Path, schema_name: str | None):
    """Validate a TOML, YAML or JSON options file without prompting."""
    try:
        options = load_options_file(options_file)
    except OptionsFileError as e:
        CONSOLE.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if schema_name:
        schema = StackSchema(schema_name.lower())
    elif "database" in options or "orm" in options:
        schema = StackSchema.LEGACY
    else:
        schema = StackSchema.CURRENT

    errors = []
    if "project_name" in options:
        name_result = validate_project_name(options["project_name"])
        if not name_result.valid:
            errors.append(name_result.error)
    errors.extend(validate_options(options, schema=schema).errors)

    if errors:
        print_errors(f"{options_file.name} is invalid", errors)
        sys.exit(1)

    CONSOLE.print(f"[green]✓[/green] {escape(options_file.name)} is a valid {schema.value} configuration")
