"""Tests for .env helpers and settings loaded from the environment."""

import os
import stat

from eliza_cli.logic.config.env_utils import get_env_var, is_env_var_set, load_env_file, persist_env_var
from eliza_cli.logic.config.settings import ServerSettings, StorageConfig


class TestEnvHelpers:
    """Tests for environment variable helpers."""

    def test_empty_values_are_treated_as_unset(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "")

        assert get_env_var("OPENAI_API_KEY", "fallback") == "fallback"
        assert is_env_var_set("OPENAI_API_KEY") is False

    def test_load_env_file_missing(self, tmp_path):
        assert load_env_file(tmp_path / ".env") is False

    def test_load_env_file_does_not_override(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("OPENAI_API_KEY=from-file\nANTHROPIC_API_KEY=from-file\n")
        monkeypatch.setenv("OPENAI_API_KEY", "from-shell")

        assert load_env_file(env_file) is True
        assert os.environ["OPENAI_API_KEY"] == "from-shell"
        assert os.environ["ANTHROPIC_API_KEY"] == "from-file"

    def test_persist_env_var_writes_file_and_process(self, tmp_path):
        env_file = tmp_path / "profile" / ".env"

        persist_env_var(env_file, "TELEGRAM_BOT_TOKEN", "abc:123")

        assert os.environ["TELEGRAM_BOT_TOKEN"] == "abc:123"
        assert "TELEGRAM_BOT_TOKEN='abc:123'" in env_file.read_text()
        assert stat.S_IMODE(env_file.stat().st_mode) & 0o077 == 0

    def test_persist_env_var_replaces_existing_key(self, tmp_path):
        env_file = tmp_path / ".env"
        persist_env_var(env_file, "OPENAI_API_KEY", "old")
        persist_env_var(env_file, "OPENAI_API_KEY", "new")

        content = env_file.read_text()
        assert content.count("OPENAI_API_KEY") == 1
        assert "'new'" in content


class TestServerSettings:
    """Tests for ServerSettings.load_env_vars."""

    def test_defaults(self):
        settings = ServerSettings()
        settings.load_env_vars()

        assert settings.port == 3000
        assert settings.host == "0.0.0.0"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SERVER_PORT", "4100")
        monkeypatch.setenv("SERVER_HOST", "127.0.0.1")

        settings = ServerSettings()
        settings.load_env_vars()

        assert settings.port == 4100
        assert settings.host == "127.0.0.1"

    def test_invalid_port_is_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("SERVER_PORT", "not-a-port")

        settings = ServerSettings()
        settings.load_env_vars()

        assert settings.port == 3000
        assert "Invalid SERVER_PORT" in caplog.text


class TestStorageConfig:
    """Tests for StorageConfig.from_environment."""

    def test_defaults_to_managed_directory(self, tmp_path):
        config = StorageConfig.from_environment(tmp_path / "db")

        assert config.data_dir == tmp_path / "db"
        assert config.postgres_url is None
        assert config.connection_string == str(tmp_path / "db" / "agents.db")

    def test_user_data_dir_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PGLITE_DATA_DIR", str(tmp_path / "custom"))

        assert StorageConfig.from_environment(tmp_path / "db").data_dir == tmp_path / "custom"

    def test_postgres_url_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("POSTGRES_URL", "postgresql://user:pw@localhost/eliza")

        config = StorageConfig.from_environment(tmp_path / "db")

        assert config.connection_string == "postgresql://user:pw@localhost/eliza"
