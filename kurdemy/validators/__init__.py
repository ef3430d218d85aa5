"""Validators for stack configurations."""

from .advice import get_recommendations, validate_stack_compatibility
from .base import (
    BaseValidator,
    EnvironmentResult,
    NameValidationResult,
    StackCompatibilityResult,
    ValidationResult,
)
from .compatibility import CompatibilityValidator
from .environment import validate_environment_setup
from .fields import FieldDomainValidator
from .options import OptionsValidator, validate_options
from .project_name import validate_project_name

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "NameValidationResult",
    "EnvironmentResult",
    "StackCompatibilityResult",
    "FieldDomainValidator",
    "CompatibilityValidator",
    "OptionsValidator",
    "validate_options",
    "validate_project_name",
    "validate_environment_setup",
    "get_recommendations",
    "validate_stack_compatibility",
]
