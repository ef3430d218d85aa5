"""Tests for the Node.js environment precondition."""

import subprocess
from unittest.mock import patch

import pytest

from kurdemy.validators import validate_environment_setup
from kurdemy.validators.environment import parse_major_version


class TestParseMajorVersion:

    @pytest.mark.parametrize(
        "version, expected",
        [("v18.17.0", 18), ("20.1.0", 20), ("v16", 16), (" v22.3.1\n", 22), ("", None), (None, None), ("node", None)],
    )
    def test_parse(self, version, expected):
        assert parse_major_version(version) == expected


class TestValidateEnvironmentSetup:

    @pytest.mark.parametrize("version", ["v16.0.0", "v18.17.0", "v22.1.0"])
    def test_supported_versions(self, version):
        result = validate_environment_setup(version)

        assert result.valid is True
        assert result.requirements == []
        assert result.error is None

    def test_old_version(self):
        result = validate_environment_setup("v14.21.3")

        assert result.valid is False
        assert result.requirements == ["Node.js 16 or higher is required. Current version: v14.21.3"]
        assert result.error == result.requirements[0]

    def test_missing_node(self):
        result = validate_environment_setup(None)

        assert result.valid is False
        assert "not found" in result.error

    def test_custom_minimum(self):
        assert validate_environment_setup("v18.0.0", minimum_major=20).valid is False
        assert validate_environment_setup("v20.0.0", minimum_major=20).valid is True


class TestDetectedEnvironment:
    """Without a version argument the installed runtime is queried."""

    def test_detects_installed_node(self):
        completed = subprocess.CompletedProcess(["node", "--version"], 0, stdout="v20.11.1\n", stderr="")
        with patch("kurdemy.io.subprocess.run", return_value=completed) as run:
            result = validate_environment_setup()

        run.assert_called_once()
        assert run.call_args.args[0] == ["node", "--version"]
        assert result.valid is True
        assert result.requirements == []

    def test_detects_old_node(self):
        completed = subprocess.CompletedProcess(["node", "--version"], 0, stdout="v14.21.3\n", stderr="")
        with patch("kurdemy.io.subprocess.run", return_value=completed):
            result = validate_environment_setup()

        assert result.error == "Node.js 16 or higher is required. Current version: v14.21.3"

    def test_detects_missing_node(self):
        with patch("kurdemy.io.subprocess.run", side_effect=FileNotFoundError("node")):
            result = validate_environment_setup()

        assert result.valid is False
        assert "not found" in result.error

    def test_explicit_none_skips_detection(self):
        with patch("kurdemy.io.subprocess.run") as run:
            result = validate_environment_setup(None)

        run.assert_not_called()
        assert result.valid is False
