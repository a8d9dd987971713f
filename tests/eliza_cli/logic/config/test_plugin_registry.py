"""Tests for the known-plugin registry."""

import pytest

from eliza_cli.logic.config.plugin_registry import (
    get_plugin_definition,
    get_plugins_by_category,
    get_required_env_vars,
    simple_plugin_name,
)
from eliza_cli.schemas.plugin import PluginCategory


class TestSimplePluginName:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("@elizaos/plugin-discord", "discord"),
            ("plugin-openai", "openai"),
            ("Telegram", "telegram"),
            ("@elizaos/plugin-local-ai", "local-ai"),
        ],
    )
    def test_reduces_package_names(self, name, expected):
        assert simple_plugin_name(name) == expected


class TestRegistryLookups:
    def test_lookup_by_package_name(self):
        definition = get_plugin_definition("@elizaos/plugin-anthropic")

        assert definition is not None
        assert definition.name == "anthropic"
        assert definition.package == "@elizaos/plugin-anthropic"

    def test_unknown_plugin_needs_nothing(self):
        assert get_plugin_definition("@acme/plugin-weather") is None
        assert get_required_env_vars("@acme/plugin-weather") == []

    def test_optional_vars_are_not_required(self):
        assert get_required_env_vars("pglite") == []

    def test_required_vars_in_declared_order(self):
        names = [var.name for var in get_required_env_vars("twitter")]

        assert names == ["TWITTER_USERNAME", "TWITTER_PASSWORD", "TWITTER_EMAIL"]

    def test_categories(self):
        services = [definition.name for definition in get_plugins_by_category(PluginCategory.SERVICE)]
        models = [definition.name for definition in get_plugins_by_category(PluginCategory.AI_MODEL)]

        assert services == ["discord", "telegram", "twitter"]
        assert models == ["openai", "anthropic", "local-ai"]
