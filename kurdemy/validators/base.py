"""Base abstract class and result types for all validators."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel


@dataclass(frozen=True)
class ValidationResult:
    """Result from validating a stack configuration."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    first_error: str | None = None

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        """Build a result from an ordered list of error messages.

        Args:
            errors: Every problem found, in reporting order

        Returns:
            ValidationResult that is valid only when no errors were found
        """
        return cls(
            valid=not errors,
            errors=list(errors),
            first_error=errors[0] if errors else None,
        )


@dataclass(frozen=True)
class NameValidationResult:
    """Result from checking a project name. Carries a single error at most."""

    valid: bool
    error: str | None = None


@dataclass(frozen=True)
class EnvironmentResult:
    """Result from checking the host environment."""

    valid: bool
    requirements: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class StackCompatibilityResult:
    """Advisory warnings about how the selected options play together."""

    compatible: bool
    warnings: list[str] = field(default_factory=list)


def as_mapping(config: Mapping[str, Any] | BaseModel) -> Mapping[str, Any]:
    """Accept either a raw option mapping or a typed model."""
    if isinstance(config, BaseModel):
        return config.model_dump(mode="json")
    return config


class BaseValidator(ABC):
    """Abstract base class for configuration validators."""

    def __init__(self, name: str) -> None:
        """Initialize the validator.

        Args:
            name: Name of the validator
        """
        self.name = name

    @abstractmethod
    def collect_errors(self, config: Mapping[str, Any]) -> list[str]:
        """Check a raw configuration and return every problem found.

        Args:
            config: Raw option mapping, possibly incomplete or malformed

        Returns:
            Error messages in reporting order, empty when nothing is wrong
        """
        pass

    def validate(self, config: Mapping[str, Any] | BaseModel) -> ValidationResult:
        """Run this validator alone and wrap its errors in a result."""
        return ValidationResult.from_errors(self.collect_errors(as_mapping(config)))

    @property
    def display_name(self) -> str:
        """Get the display name for this validator.

        Returns:
            Display name for UI purposes
        """
        return self.name.replace("_", " ").title()
