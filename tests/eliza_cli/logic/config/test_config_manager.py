"""Tests for the persisted user configuration."""

import json
import logging

import pytest

from eliza_cli.logic.config.config_manager import ConfigManager
from eliza_cli.schemas.config import UserConfig


@pytest.fixture
def manager(eliza_home, quiet_console):
    return ConfigManager(home=eliza_home, console=quiet_console)


class TestLoadConfig:
    """Tests for ConfigManager.load_config."""

    def test_missing_file_yields_default(self, manager):
        config = manager.load_config()

        assert config.is_default is True
        assert config.services == []
        assert config.ai_models == []

    def test_two_loads_without_save_are_identical(self, manager):
        manager.save_config(UserConfig(services=["discord"], ai_models=["openai"]))

        assert manager.load_config() == manager.load_config()

    def test_malformed_json_degrades_to_default(self, manager, caplog):
        manager.config_path.parent.mkdir(parents=True, exist_ok=True)
        manager.config_path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = manager.load_config()

        assert config.is_default is True
        assert "Could not read configuration" in caplog.text

    def test_non_object_json_degrades_to_default(self, manager):
        manager.config_path.parent.mkdir(parents=True, exist_ok=True)
        manager.config_path.write_text("[1, 2]", encoding="utf-8")

        assert manager.load_config().is_default is True

    def test_invalid_field_types_degrade_to_default(self, manager):
        manager.config_path.parent.mkdir(parents=True, exist_ok=True)
        manager.config_path.write_text(json.dumps({"services": "discord"}), encoding="utf-8")

        assert manager.load_config().is_default is True

    def test_stored_is_default_flag_is_ignored(self, manager):
        manager.config_path.parent.mkdir(parents=True, exist_ok=True)
        manager.config_path.write_text(
            json.dumps({"services": [], "aiModels": ["anthropic"], "isDefault": True}),
            encoding="utf-8",
        )

        config = manager.load_config()

        assert config.is_default is False
        assert config.ai_models == ["anthropic"]


class TestSaveConfig:
    """Tests for ConfigManager.save_config."""

    def test_saved_config_uses_camel_case_keys(self, manager):
        manager.save_config(
            UserConfig(services=["telegram"], ai_models=["openai"], last_updated="2026-01-01T00:00:00+00:00")
        )

        stored = json.loads(manager.config_path.read_text(encoding="utf-8"))

        assert stored == {
            "services": ["telegram"],
            "aiModels": ["openai"],
            "lastUpdated": "2026-01-01T00:00:00+00:00",
        }

    def test_saving_default_config_persists_non_default(self, manager):
        manager.save_config(UserConfig.default())

        assert "isDefault" not in json.loads(manager.config_path.read_text(encoding="utf-8"))
        assert manager.load_config().is_default is False

    def test_save_creates_profile_directory(self, manager, eliza_home):
        assert not eliza_home.exists()

        manager.save_config(UserConfig(services=[], ai_models=[]))

        assert manager.config_path.exists()


class TestPluginStatus:
    """Tests for plugin readiness reporting."""

    def test_plugins_without_required_vars_are_ready(self, manager):
        status = manager.get_plugin_status()

        assert status["pglite"] is True
        assert status["local-ai"] is True

    def test_missing_credentials_are_reported(self, manager, monkeypatch):
        assert manager.get_plugin_status()["openai"] is False

        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        assert manager.get_plugin_status()["openai"] is True

    def test_all_required_vars_must_be_set(self, manager, monkeypatch):
        monkeypatch.setenv("DISCORD_APPLICATION_ID", "123")

        assert manager.get_plugin_status()["discord"] is False

        monkeypatch.setenv("DISCORD_API_TOKEN", "token")

        assert manager.get_plugin_status()["discord"] is True

    def test_empty_value_counts_as_missing(self, manager, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "")

        assert manager.get_plugin_status()["telegram"] is False

    def test_display_config_status_lists_plugins(self, manager, quiet_console):
        manager.save_config(UserConfig(services=["discord"], ai_models=[]))

        manager.display_config_status()
        output = quiet_console.export_text()

        assert "Discord" in output
        assert "OpenAI" in output
        assert "missing" in output

    def test_display_config_status_first_run(self, manager, quiet_console):
        manager.display_config_status()

        assert "No saved configuration yet" in quiet_console.export_text()
