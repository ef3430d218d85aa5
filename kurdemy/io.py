"""IO utilities for options files and runtime detection."""

import json
import subprocess
import tomllib
from pathlib import Path
from typing import Any, Optional

import tomli_w
import yaml


class OptionsFileError(RuntimeError):
    pass


def detect_node_version() -> Optional[str]:
    """
    Ask the installed Node.js runtime for its version.

    Returns:
        Version string such as ``v18.17.0``, or None if node is not available
    """
    try:
        result = subprocess.run(
            ["node", "--version"],
            capture_output=True,
            text=True,
            check=True
        )
        return result.stdout.strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError):
        # Not installed or not runnable
        return None


def load_options_file(path: Path) -> dict[str, Any]:
    """
    Read a raw options mapping from a TOML, YAML or JSON file.

    Values are returned as written; validation is left to the caller.

    Args:
        path: File to read

    Returns:
        The parsed mapping
    """
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix in (".yaml", ".yml"):
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        else:
            raise OptionsFileError(f"Unsupported options file type: {path.name} (use .toml, .yaml or .json)")
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise OptionsFileError(f"Could not read options file {path}: {e}") from e

    if not isinstance(data, dict):
        raise OptionsFileError(f"Options file {path} must contain a mapping at the top level")
    return data


def write_options_file(path: Path, options: dict[str, Any]) -> Path:
    """
    Write an options mapping as TOML.

    Args:
        path: Destination file; parent directories are created
        options: Mapping to write

    Returns:
        The path written to
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(options, f)
    return path
