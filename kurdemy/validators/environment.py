"""Host environment precondition check."""

import re

from kurdemy.io import detect_node_version

from .base import EnvironmentResult

DEFAULT_MINIMUM_NODE_MAJOR = 16

_MAJOR_PATTERN = re.compile(r"^v?(\d+)")

# Distinguishes "not given" from an explicit None, which means node is missing
_DETECT = object()


def parse_major_version(version: str | None) -> int | None:
    """Extract the major component from a version string such as ``v18.17.0``."""
    if not version:
        return None
    match = _MAJOR_PATTERN.match(version.strip())
    if match is None:
        return None
    return int(match.group(1))


def validate_environment_setup(
    version: str | None | object = _DETECT,
    *,
    minimum_major: int = DEFAULT_MINIMUM_NODE_MAJOR,
) -> EnvironmentResult:
    """Check that the Node.js runtime is recent enough for the generated stack.

    Args:
        version: Output of ``node --version``, or None when Node.js is missing.
            When omitted, the installed runtime is asked for its version.
        minimum_major: Lowest accepted major version

    Returns:
        EnvironmentResult listing every unmet requirement
    """
    if version is _DETECT:
        version = detect_node_version()

    requirements = []

    major = parse_major_version(version)
    if major is None:
        requirements.append(
            f"Node.js {minimum_major} or higher is required. Node.js was not found on PATH."
        )
    elif major < minimum_major:
        requirements.append(
            f"Node.js {minimum_major} or higher is required. Current version: {version.strip()}"
        )

    return EnvironmentResult(
        valid=not requirements,
        requirements=requirements,
        error=requirements[0] if requirements else None,
    )
