"""User-level settings for the kurdemy tool."""

import sys
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import SettingsConfigDict
from rich.markup import escape
from rich.panel import Panel

from kurdemy.configs.base import BaseConfig
from kurdemy.logging import CONSOLE
from kurdemy.options import PackageManager, StackSchema
from kurdemy.validators.environment import DEFAULT_MINIMUM_NODE_MAJOR


class KurdemySettings(BaseConfig):
    """Defaults applied when a choice is not given on the command line."""

    default_package_manager: PackageManager = Field(
        default=PackageManager.NPM,
        description="Package manager offered first when creating a project",
    )
    schema_variant: StackSchema = Field(
        default=StackSchema.CURRENT,
        description="Option set used for new configurations",
    )
    show_recommendations: bool = Field(
        default=True,
        description="Print advice after a configuration is accepted",
    )
    minimum_node_major: int = Field(
        default=DEFAULT_MINIMUM_NODE_MAJOR,
        ge=1,
        description="Lowest Node.js major version accepted by `kurdemy doctor`",
    )

    model_config = SettingsConfigDict(
        env_prefix="KURDEMY_",
        # Case insensitive for env vars
        case_sensitive=False,
        # Extra fields are ignored
        extra="ignore",
    )

    @classmethod
    def get_possible_config_paths(cls) -> list[Path]:
        """Get the configuration file paths."""
        return [Path.home() / ".kurdemy" / "config.toml"]


def get_settings() -> KurdemySettings:
    """Get the current settings, loading from config and environment."""
    try:
        return KurdemySettings.load_from_disk()
    except ValidationError as e:
        CONSOLE.print(Panel(
            "[bold red]Invalid Configuration[/bold red]\n\n"
            f"{KurdemySettings.get_config_path()} could not be loaded:\n{escape(str(e))}\n\n"
            "Please run the configuration wizard:\n\n"
            "[bold cyan]kurdemy configure[/bold cyan]",
            border_style="red"
        ))
        sys.exit(1)
