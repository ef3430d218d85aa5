"""Tests for user settings persistence."""

import tomllib

import pytest

from kurdemy.configs.system import KurdemySettings, get_settings
from kurdemy.options import PackageManager, StackSchema


class TestKurdemySettings:

    def test_defaults_without_config_file(self, isolated_home):
        settings = get_settings()

        assert settings.default_package_manager is PackageManager.NPM
        assert settings.schema_variant is StackSchema.CURRENT
        assert settings.show_recommendations is True
        assert settings.minimum_node_major == 16
        assert not (isolated_home / ".kurdemy" / "config.toml").exists()

    def test_config_path_lives_in_home(self, isolated_home):
        assert KurdemySettings.get_config_path() == isolated_home / ".kurdemy" / "config.toml"

    def test_save_and_reload(self, isolated_home):
        settings = KurdemySettings(default_package_manager=PackageManager.PNPM, schema_variant=StackSchema.LEGACY)
        path = settings.save_to_disk()

        assert path == isolated_home / ".kurdemy" / "config.toml"
        with path.open("rb") as f:
            assert tomllib.load(f)["default_package_manager"] == "pnpm"

        reloaded = KurdemySettings.load_from_disk()
        assert reloaded.default_package_manager is PackageManager.PNPM
        assert reloaded.schema_variant is StackSchema.LEGACY

    def test_environment_overrides_file(self, monkeypatch):
        KurdemySettings(default_package_manager=PackageManager.YARN).save_to_disk()
        monkeypatch.setenv("KURDEMY_DEFAULT_PACKAGE_MANAGER", "pnpm")
        monkeypatch.setenv("KURDEMY_SHOW_RECOMMENDATIONS", "false")

        settings = get_settings()

        assert settings.default_package_manager is PackageManager.PNPM
        assert settings.show_recommendations is False

    def test_invalid_file_exits(self, isolated_home):
        path = isolated_home / ".kurdemy" / "config.toml"
        path.parent.mkdir()
        path.write_text('default_package_manager = "bun"\n')

        with pytest.raises(SystemExit) as excinfo:
            get_settings()

        assert excinfo.value.code == 1
