"""Composite validator for a full stack configuration."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from kurdemy.options import StackSchema

from .base import BaseValidator, ValidationResult
from .compatibility import CompatibilityValidator
from .fields import FieldDomainValidator


class OptionsValidator(BaseValidator):
    """
    Runs the field domain checks followed by the cross-field rules and merges
    their errors into one result. The schema variant is fixed at construction:
    only the ``legacy`` schema knows about the database and ORM fields.
    """

    def __init__(self, *, schema: StackSchema = StackSchema.CURRENT) -> None:
        super().__init__("options")
        self.schema = schema
        self.validators: list[BaseValidator] = [
            FieldDomainValidator(schema=schema),
            CompatibilityValidator(schema=schema),
        ]

    def collect_errors(self, config: Mapping[str, Any]) -> list[str]:
        errors: list[str] = []
        for validator in self.validators:
            errors.extend(validator.collect_errors(config))
        return errors


def validate_options(
    config: Mapping[str, Any] | BaseModel,
    *,
    schema: StackSchema = StackSchema.CURRENT,
) -> ValidationResult:
    """Validate a stack configuration.

    Never raises for invalid input; every problem is reported in the result.

    Args:
        config: Raw option mapping or a typed configuration model
        schema: Which option set the configuration targets

    Returns:
        ValidationResult with all domain and compatibility errors
    """
    return OptionsValidator(schema=schema).validate(config)
