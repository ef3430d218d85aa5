"""Base configuration management for the kurdemy tool."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TypeVar

import tomli_w
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

T = TypeVar("T", bound="BaseConfig")


class BaseConfig(BaseSettings, ABC):
    """Abstract base class for settings persisted as TOML.

    Values resolve from constructor arguments first, then environment
    variables, then the first existing configuration file.
    """

    @classmethod
    @abstractmethod
    def get_possible_config_paths(cls) -> list[Path]:
        """Return a list of possible paths where the config file might be found.

        :return: List of Path objects to search for configuration files
        :rtype: List[Path]
        """
        pass

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the first existing config file, or the preferred location for a new one."""
        possible_paths = cls.get_possible_config_paths()
        for path in possible_paths:
            if path.exists():
                return path
        return possible_paths[0]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=cls.get_config_path()),
        )

    @classmethod
    def load_from_disk(cls: type[T]) -> T:
        """Load configuration from disk, falling back to defaults when absent.

        :return: Configuration instance
        :rtype: T
        """
        return cls()

    def save_to_disk(self) -> Path:
        """Save configuration to disk.

        :return: Path the configuration was written to
        :rtype: Path
        """
        current_config = self.get_config_path()
        current_config.parent.mkdir(parents=True, exist_ok=True)
        with current_config.open("wb") as f:
            tomli_w.dump(self.model_dump(mode="json"), f)
        return current_config
