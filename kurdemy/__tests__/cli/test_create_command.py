"""Tests for the create command."""

import tomllib

import pytest
from click.testing import CliRunner

from kurdemy.configs.system import KurdemySettings
from kurdemy.entrypoint import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCreateCommand:

    def test_defaults(self, runner):
        result = runner.invoke(cli, ["create", "my-app", "--yes"])

        assert result.exit_code == 0, result.output
        assert "Stack for my-app" in result.output
        assert "Configuration is valid" in result.output

    def test_invalid_project_name(self, runner):
        result = runner.invoke(cli, ["create", "node_modules", "--yes"])

        assert result.exit_code == 1
        assert "reserved name" in result.output

    def test_auth_with_react(self, runner):
        result = runner.invoke(cli, ["create", "my-app", "--yes", "--frontend", "react", "--auth"])

        assert result.exit_code == 1
        assert "NextAuth.js requires Next.js" in result.output

    def test_reports_every_error(self, runner):
        result = runner.invoke(
            cli,
            ["create", "my-app", "--yes", "--frontend", "angular", "--package-manager", "bun"],
        )

        assert result.exit_code == 1
        assert "Invalid frontend choice" in result.output
        assert "Invalid package manager" in result.output

    def test_legacy_drizzle_sqlserver(self, runner):
        result = runner.invoke(
            cli,
            ["create", "my-app", "--yes", "--schema", "legacy", "--database", "sqlserver", "--orm", "drizzle"],
        )

        assert result.exit_code == 1
        assert "Drizzle ORM does not fully support SQL Server" in result.output

    def test_saves_configuration(self, runner, tmp_path):
        target = tmp_path / "stack.toml"
        result = runner.invoke(
            cli,
            ["create", "my-app", "--yes", "--no-tailwind", "--package-manager", "yarn", "--save", str(target)],
        )

        assert result.exit_code == 0, result.output
        with target.open("rb") as f:
            saved = tomllib.load(f)
        assert saved == {
            "project_name": "my-app",
            "frontend": "nextjs",
            "trpc": True,
            "auth": True,
            "tailwind": False,
            "package_manager": "yarn",
        }

    def test_recommendations_shown(self, runner):
        result = runner.invoke(cli, ["create", "my-app", "--yes", "--no-tailwind"])

        assert "Recommendations" in result.output
        assert "Tailwind CSS can significantly speed up" in result.output

    def test_recommendations_can_be_disabled(self, runner):
        KurdemySettings(show_recommendations=False).save_to_disk()

        result = runner.invoke(cli, ["create", "my-app", "--yes", "--no-tailwind"])

        assert result.exit_code == 0, result.output
        assert "Recommendations" not in result.output

    def test_schema_default_from_settings(self, runner, tmp_path):
        KurdemySettings(schema_variant="legacy").save_to_disk()
        target = tmp_path / "stack.toml"

        result = runner.invoke(cli, ["create", "my-app", "--yes", "--save", str(target)])

        assert result.exit_code == 0, result.output
        with target.open("rb") as f:
            saved = tomllib.load(f)
        assert saved["database"] == "postgresql"
        assert saved["orm"] == "prisma"

    def test_interactive_prompts(self, runner):
        result = runner.invoke(cli, ["create", "my-app"], input="react\ny\ny\npnpm\n")

        assert result.exit_code == 0, result.output
        assert "pnpm" in result.output
        assert "tRPC works great with React" in result.output
