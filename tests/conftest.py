"""Shared fixtures for eliza_cli tests."""

import io
import logging
import os
from unittest.mock import patch

import pytest
from rich.console import Console

from eliza_cli.logic.config.plugin_registry import KNOWN_PLUGINS
from eliza_cli.logic.config.settings import StorageConfig

_AMBIENT_VARS = ("SERVER_PORT", "SERVER_HOST", "POSTGRES_URL", "LOG_LEVEL", "ELIZA_NONINTERACTIVE")


@pytest.fixture(autouse=True)
def eliza_home(tmp_path, monkeypatch):
    """Isolated profile directory and a clean plugin environment for every test."""
    home = tmp_path / "eliza_home"
    with patch.dict(os.environ, clear=False):
        monkeypatch.setenv("ELIZA_HOME", str(home))
        for definition in KNOWN_PLUGINS.values():
            for var in definition.env_vars:
                monkeypatch.delenv(var.name, raising=False)
        for var in _AMBIENT_VARS:
            monkeypatch.delenv(var, raising=False)
        yield home


@pytest.fixture
def quiet_console():
    """Rich console that records output instead of printing it."""
    return Console(file=io.StringIO(), record=True, width=120)


@pytest.fixture
def storage_config(tmp_path):
    return StorageConfig(data_dir=tmp_path / "db")


@pytest.fixture
def root_logger():
    """Fixture to get the root logger and restore it after test."""
    logger = logging.getLogger()
    original_handlers = logger.handlers[:]
    original_level = logger.level
    yield logger
    logger.handlers = original_handlers
    logger.setLevel(original_level)
