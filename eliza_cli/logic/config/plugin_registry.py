"""
Registry of plugins the CLI can configure.

Each entry lists the environment variables the plugin reads. Only required
variables affect plugin status and prompting; optional ones are documented so
they show up in the status table.
"""

from typing import Dict, List, Optional

from eliza_cli.constants import DATABASE_PLUGIN
from eliza_cli.schemas.plugin import EnvVarSpec, PluginCategory, PluginDefinition

_PACKAGE_PREFIX = "@elizaos/plugin-"


def _definition(
    name: str,
    display_name: str,
    category: PluginCategory,
    description: str,
    env_vars: Optional[List[EnvVarSpec]] = None,
) -> PluginDefinition:
    return PluginDefinition(
        name=name,
        display_name=display_name,
        category=category,
        package=f"{_PACKAGE_PREFIX}{name}",
        description=description,
        env_vars=env_vars or [],
    )


KNOWN_PLUGINS: Dict[str, PluginDefinition] = {
    definition.name: definition
    for definition in (
        # Database
        _definition(
            DATABASE_PLUGIN,
            "PGLite",
            PluginCategory.DATABASE,
            "Embedded database stored in the profile directory",
            [
                EnvVarSpec(
                    name="PGLITE_DATA_DIR",
                    description="Directory for the embedded database",
                    required=False,
                )
            ],
        ),
        _definition(
            "postgres",
            "PostgreSQL",
            PluginCategory.DATABASE,
            "External PostgreSQL server",
            [EnvVarSpec(name="POSTGRES_URL", description="PostgreSQL connection URL", secret=True)],
        ),
        # Services
        _definition(
            "discord",
            "Discord",
            PluginCategory.SERVICE,
            "Chat on Discord servers",
            [
                EnvVarSpec(name="DISCORD_APPLICATION_ID", description="Discord application ID"),
                EnvVarSpec(name="DISCORD_API_TOKEN", description="Discord bot token", secret=True),
            ],
        ),
        _definition(
            "telegram",
            "Telegram",
            PluginCategory.SERVICE,
            "Chat on Telegram",
            [EnvVarSpec(name="TELEGRAM_BOT_TOKEN", description="Telegram bot token", secret=True)],
        ),
        _definition(
            "twitter",
            "Twitter",
            PluginCategory.SERVICE,
            "Post and reply on Twitter",
            [
                EnvVarSpec(name="TWITTER_USERNAME", description="Twitter username"),
                EnvVarSpec(name="TWITTER_PASSWORD", description="Twitter password", secret=True),
                EnvVarSpec(name="TWITTER_EMAIL", description="Twitter account email"),
            ],
        ),
        # AI models
        _definition(
            "openai",
            "OpenAI",
            PluginCategory.AI_MODEL,
            "OpenAI hosted models",
            [EnvVarSpec(name="OPENAI_API_KEY", description="OpenAI API key", secret=True)],
        ),
        _definition(
            "anthropic",
            "Anthropic",
            PluginCategory.AI_MODEL,
            "Anthropic hosted models",
            [EnvVarSpec(name="ANTHROPIC_API_KEY", description="Anthropic API key", secret=True)],
        ),
        _definition(
            "local-ai",
            "Local AI",
            PluginCategory.AI_MODEL,
            "Models running on this machine",
            [
                EnvVarSpec(
                    name="LOCAL_AI_MODELS_DIR",
                    description="Directory holding local model files",
                    required=False,
                )
            ],
        ),
    )
}


def get_plugin_definition(name: str) -> Optional[PluginDefinition]:
    """Look up a plugin by short name, package name, or ``plugin-`` prefixed name."""
    return KNOWN_PLUGINS.get(simple_plugin_name(name))


def get_plugins_by_category(category: PluginCategory) -> List[PluginDefinition]:
    return [definition for definition in KNOWN_PLUGINS.values() if definition.category == category]


def get_required_env_vars(name: str) -> List[EnvVarSpec]:
    """Required environment variables for a plugin; unknown plugins need none."""
    definition = get_plugin_definition(name)
    if definition is None:
        return []
    return definition.required_env_vars


def simple_plugin_name(name: str) -> str:
    """Reduce a plugin package name to its short name.

    ``"@elizaos/plugin-discord"`` -> ``"discord"``; short names pass through
    lowercased.
    """
    simple = name.split("/")[-1].replace("plugin-", "")
    return (simple or name).lower()
