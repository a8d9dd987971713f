"""Tests for logging setup, the shared error handler and profile paths."""

import logging
from pathlib import Path

import pytest

from eliza_cli.logic.utils.errors import CharacterLoadError, ConfigurationError, ElizaError
from eliza_cli.logic.utils.handle_error import handle_error
from eliza_cli.logic.utils.logging_config import setup_basic_logging
from eliza_cli.logic.utils.path_resolution import get_client_build_candidates, get_eliza_home


class TestSetupBasicLogging:
    def test_level_from_environment(self, root_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")

        setup_basic_logging()

        assert root_logger.level == logging.WARNING

    def test_explicit_level_wins(self, root_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        setup_basic_logging(level=logging.DEBUG)

        assert root_logger.level == logging.DEBUG

    def test_unknown_level_name_falls_back_to_info(self, root_logger):
        setup_basic_logging(level="chatty")

        assert root_logger.level == logging.INFO

    def test_file_logging(self, root_logger, tmp_path):
        log_dir = tmp_path / "logs"

        setup_basic_logging(level=logging.INFO, log_to_file=True, console_output=False, log_dir=log_dir)
        logging.getLogger("eliza_cli.test").info("written to file")
        for handler in root_logger.handlers:
            handler.flush()

        assert "written to file" in (log_dir / "eliza.log").read_text()

    def test_file_logging_requires_directory(self, root_logger):
        with pytest.raises(ValueError):
            setup_basic_logging(log_to_file=True)

    def test_noisy_loggers_quieted_above_debug(self, root_logger):
        setup_basic_logging(level=logging.INFO)

        assert logging.getLogger("httpx").level == logging.WARNING


class TestHandleError:
    def test_known_error_exits_1(self, caplog):
        with pytest.raises(SystemExit) as exc_info:
            handle_error(ConfigurationError("bad config", path="/tmp/config.json"))

        assert exc_info.value.code == 1
        assert "bad config" in caplog.text

    def test_unexpected_error_names_type(self, caplog):
        with pytest.raises(SystemExit):
            handle_error(KeyError("missing"))

        assert "KeyError" in caplog.text

    def test_character_load_error_message(self):
        error = CharacterLoadError("hero.json", "file not found")

        assert isinstance(error, ElizaError)
        assert str(error) == "Failed to load character from hero.json: file not found"


class TestPaths:
    def test_eliza_home_from_environment(self, eliza_home):
        assert get_eliza_home() == eliza_home

    def test_default_home(self, monkeypatch):
        monkeypatch.delenv("ELIZA_HOME")

        assert get_eliza_home() == Path.home() / ".eliza"

    def test_client_candidates_packaged_first(self):
        packaged, development = get_client_build_candidates()

        assert packaged.name == "client"
        assert development.parts[-3:] == ("packages", "client", "dist")
