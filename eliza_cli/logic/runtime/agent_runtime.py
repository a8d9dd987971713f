"""
Agent runtime.

Binds one character to its plugins and the shared agent store. Reasoning and
message handling belong to plugins; the runtime only sequences their init
hooks and tracks lifecycle state.
"""

import inspect
import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from eliza_cli.logic.persistence.agent_store import AgentStore
from eliza_cli.logic.utils.identifiers import string_to_uuid
from eliza_cli.protocols.plugin import Plugin
from eliza_cli.schemas.character import Character, PluginReference
from eliza_cli.schemas.project import PluginSpec

logger = logging.getLogger(__name__)


class RuntimeState(str, Enum):
    CREATED = "created"
    INITIALIZED = "initialized"
    CLOSED = "closed"


def _plugin_from_mapping(data: Mapping[str, Any]) -> Union[PluginSpec, PluginReference]:
    """Mappings with a callable init are live plugins; otherwise they only name one."""
    if callable(data.get("init")):
        return PluginSpec(name=data["name"], init_hook=data["init"], description=data.get("description"))
    return PluginReference(name=data["name"], init=data.get("init"))


async def _maybe_await(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class AgentRuntime:
    """Execution context for a single agent."""

    def __init__(
        self,
        character: Character,
        plugins: Sequence[Any] = (),
        store: Optional[AgentStore] = None,
    ) -> None:
        if not character.id:
            character.id = string_to_uuid(character.name)
        self.character = character
        self.agent_id: str = character.id
        self.store = store
        self.state = RuntimeState.CREATED
        self.plugins: List[Plugin] = []
        self.settings: Dict[str, Any] = {}

        for plugin in plugins:
            self._add_plugin(plugin)

    def _add_plugin(self, plugin: Any) -> None:
        """Attach a plugin object; names become plugin references on the character."""
        if isinstance(plugin, str):
            if plugin not in self.character.plugin_names:
                self.character.plugins.append(plugin)
            return
        if isinstance(plugin, Mapping):
            plugin = _plugin_from_mapping(plugin)
        if isinstance(plugin, PluginReference):
            if plugin.name not in self.character.plugin_names:
                self.character.plugins.append(plugin)
            return
        if isinstance(plugin, Plugin):
            if any(existing.name == plugin.name for existing in self.plugins):
                return
            self.plugins.append(plugin)
            return
        raise TypeError(f"Unsupported plugin {plugin!r}: expected a name or an object with 'name' and 'init'")

    @property
    def is_initialized(self) -> bool:
        return self.state == RuntimeState.INITIALIZED

    def get_setting(self, key: str) -> Optional[Any]:
        """Look up a setting: runtime overrides, character secrets, then character settings."""
        if key in self.settings:
            return self.settings[key]
        if key in self.character.secrets:
            return self.character.secrets[key]
        return self.character.settings.get(key)

    def set_setting(self, key: str, value: Any) -> None:
        self.settings[key] = value

    async def initialize(self) -> None:
        """Run plugin init hooks in order, then record the agent as started."""
        if self.state != RuntimeState.CREATED:
            raise RuntimeError(f"Runtime for {self.character.name} cannot initialize from state {self.state.value}")

        for plugin in self.plugins:
            config = self.character.plugin_init_config(plugin.name)
            logger.debug(f"Initializing plugin {plugin.name} for {self.character.name}")
            await _maybe_await(plugin.init(config, self))

        if self.store is not None:
            self.store.open()
            self.store.record_agent_started(
                self.agent_id,
                self.character.name,
                self.character.model_dump_json(exclude={"settings"}),
            )

        self.state = RuntimeState.INITIALIZED

    async def close(self) -> None:
        """Release resources. Closing twice is a no-op."""
        if self.state == RuntimeState.CLOSED:
            return
        if self.store is not None and self.store.is_open and self.state == RuntimeState.INITIALIZED:
            self.store.record_agent_stopped(self.agent_id)
        self.state = RuntimeState.CLOSED
        logger.debug(f"Closed runtime for {self.character.name}")
