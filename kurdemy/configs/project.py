"""Typed record of an accepted stack configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kurdemy.options import Database, Frontend, Orm, PackageManager, StackSchema
from kurdemy.validators.options import validate_options


class StackConfig(BaseModel):
    """A configuration that passed validation.

    Construction re-runs the option validator, so an instance always
    describes a valid stack. Instances are immutable.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str | None = Field(default=None, description="Name of the project")
    frontend: Frontend
    database: Database | None = Field(default=None, description="Only set for the legacy schema")
    orm: Orm | None = Field(default=None, description="Only set for the legacy schema")
    trpc: bool
    auth: bool
    tailwind: bool
    package_manager: PackageManager

    @model_validator(mode="before")
    @classmethod
    def check_options(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        legacy = data.get("database") is not None or data.get("orm") is not None
        schema = StackSchema.LEGACY if legacy else StackSchema.CURRENT
        result = validate_options(data, schema=schema)
        if not result.valid:
            raise ValueError("; ".join(result.errors))
        return data

    @property
    def schema_variant(self) -> StackSchema:
        """Which option set this configuration was built from."""
        return StackSchema.LEGACY if self.database is not None else StackSchema.CURRENT

    def to_options(self) -> dict[str, Any]:
        """Plain mapping suitable for writing to an options file."""
        return self.model_dump(mode="json", exclude_none=True)
