"""Project name checks.

Unlike the option validators this one stops at the first failed rule, since
each rule assumes the earlier ones hold.
"""

import re
from typing import Any

from kurdemy.options import MAX_PROJECT_NAME_LENGTH, RESERVED_PROJECT_NAMES

from .base import NameValidationResult

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.-]+")


def validate_project_name(name: Any) -> NameValidationResult:
    """Check that a name is usable as a directory and package name.

    The name is never normalized or modified.

    Args:
        name: Candidate project name

    Returns:
        NameValidationResult with the first violated rule, if any
    """
    if not name or not isinstance(name, str):
        return NameValidationResult(valid=False, error="Project name is required and must be a string.")

    if len(name) > MAX_PROJECT_NAME_LENGTH:
        return NameValidationResult(
            valid=False,
            error=f"Project name is too long (max {MAX_PROJECT_NAME_LENGTH} characters).",
        )

    if not _NAME_PATTERN.fullmatch(name):
        return NameValidationResult(
            valid=False,
            error="Project name can only contain letters, numbers, hyphens, underscores, and dots.",
        )

    if name.startswith((".", "-")):
        return NameValidationResult(valid=False, error="Project name cannot start with a dot or hyphen.")

    if name.lower() in RESERVED_PROJECT_NAMES:
        return NameValidationResult(
            valid=False,
            error=f'"{name}" is a reserved name and cannot be used as a project name.',
        )

    return NameValidationResult(valid=True)
