"""Synthesizes the default character from the selected plugins."""

import logging
from typing import List, Sequence

from eliza_cli.constants import DATABASE_PLUGIN
from eliza_cli.logic.config.plugin_registry import get_plugin_definition
from eliza_cli.schemas.character import Character, PluginRef

logger = logging.getLogger(__name__)

DEFAULT_CHARACTER_NAME = "Eliza"

_DEFAULT_SYSTEM_PROMPT = (
    "Respond to all messages in a helpful, conversational manner. "
    "Provide assistance on a wide range of topics, using knowledge when needed. "
    "Be concise but thorough, friendly but professional."
)


def _package_for(name: str) -> str:
    definition = get_plugin_definition(name)
    return definition.package if definition else name


def generate_custom_character(services: Sequence[str], ai_models: Sequence[str]) -> Character:
    """Build the standalone character used when no project supplies one.

    Its plugin list is the database plugin followed by the selected AI models and
    services, each as a package reference, without duplicates.
    """
    plugins: List[PluginRef] = []
    for name in [DATABASE_PLUGIN, *ai_models, *services]:
        package = _package_for(name)
        if package not in plugins:
            plugins.append(package)

    character = Character(
        name=DEFAULT_CHARACTER_NAME,
        username=DEFAULT_CHARACTER_NAME.lower(),
        system=_DEFAULT_SYSTEM_PROMPT,
        bio=[
            "An AI assistant configured from the Eliza CLI.",
            "Helpful, curious and direct.",
        ],
        topics=["general knowledge", "technology", "conversation"],
        adjectives=["helpful", "friendly", "knowledgeable"],
        plugins=plugins,
        settings={"secrets": {}},
    )
    logger.debug(f"Generated character {character.name} with plugins: {', '.join(character.plugin_names)}")
    return character
