"""Single-field checks against each option's allowed values."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from kurdemy.options import (
    BOOLEAN_OPTIONS,
    Database,
    Frontend,
    Orm,
    PackageManager,
    StackSchema,
    choice_values,
)

from .base import BaseValidator


def _format_choices(values: tuple[str, ...]) -> str:
    quoted = [f'"{value}"' for value in values]
    if len(quoted) == 2:
        return f"{quoted[0]} or {quoted[1]}"
    return ", ".join(quoted[:-1]) + f", or {quoted[-1]}"


def invalid_choice_message(label: str, enum_cls: type[Enum]) -> str:
    """Build the error reported when a field holds a value outside its choices."""
    return f"Invalid {label} choice. Must be {_format_choices(choice_values(enum_cls))}."


class FieldDomainValidator(BaseValidator):
    """
    Checks that every enumerated field holds one of its permitted values and
    that boolean options are real booleans. All fields are checked so the
    caller sees every problem at once.
    """

    def __init__(self, *, schema: StackSchema = StackSchema.CURRENT) -> None:
        super().__init__("field_domain")
        self.schema = schema

    @property
    def choice_fields(self) -> list[tuple[str, str, type[Enum]]]:
        """(key, label, enum) for each enumerated field, in reporting order."""
        fields: list[tuple[str, str, type[Enum]]] = [("frontend", "frontend", Frontend)]
        if self.schema == StackSchema.LEGACY:
            fields.append(("database", "database", Database))
            fields.append(("orm", "ORM", Orm))
        fields.append(("package_manager", "package manager", PackageManager))
        return fields

    def collect_errors(self, config: Mapping[str, Any]) -> list[str]:
        errors = []

        for key, label, enum_cls in self.choice_fields:
            value = config.get(key)
            if isinstance(value, Enum):
                value = value.value
            if value not in choice_values(enum_cls):
                errors.append(invalid_choice_message(label, enum_cls))

        # bool is checked by type, so 1, "true" and None are all rejected
        for option in BOOLEAN_OPTIONS:
            if not isinstance(config.get(option), bool):
                errors.append(f"{option} must be a boolean value.")

        return errors
