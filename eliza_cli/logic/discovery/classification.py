"""
Structural classification of loaded modules.

A plugin is anything with a non-empty ``name`` and a callable ``init``; a
project is anything carrying ``agents`` (or a single ``agent``). Both objects
and mappings are accepted.
"""

import logging
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from eliza_cli.logic.character.loader import json_to_character
from eliza_cli.logic.utils.errors import CharacterLoadError
from eliza_cli.protocols.plugin import Plugin
from eliza_cli.schemas.character import Character
from eliza_cli.schemas.project import PluginSpec, ProjectAgent, ProjectDescriptor, RawModule

logger = logging.getLogger(__name__)


def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def is_plugin_shaped(obj: Any) -> bool:
    if obj is None or isinstance(obj, (str, bytes)):
        return False
    name = _field(obj, "name")
    return isinstance(name, str) and bool(name) and callable(_field(obj, "init"))


def is_project_shaped(obj: Any) -> bool:
    if obj is None or isinstance(obj, (str, bytes)):
        return False
    return _field(obj, "agents") is not None or _field(obj, "agent") is not None


def as_plugin(obj: Any) -> Plugin:
    """Return ``obj`` as a Plugin, wrapping mapping-style declarations."""
    if isinstance(obj, Mapping):
        return PluginSpec(name=obj["name"], init_hook=obj["init"], description=obj.get("description"))
    return obj


def find_plugin_export(module: RawModule) -> Optional[Plugin]:
    """First plugin-shaped value: the default export, then named exports in order."""
    if is_plugin_shaped(module.default):
        return as_plugin(module.default)
    for key, value in module.exports.items():
        if is_plugin_shaped(value):
            logger.info(f"Found plugin export under key: {key}")
            return as_plugin(value)
    return None


def _to_character(raw: Any) -> Character:
    if isinstance(raw, Character):
        return raw
    if isinstance(raw, Mapping):
        return json_to_character(dict(raw))
    raise CharacterLoadError(repr(raw), "agent character must be a mapping or Character")


def _agent_specs(project: Any) -> List[Any]:
    agents = _field(project, "agents")
    if isinstance(agents, (list, tuple)):
        return list(agents)
    agent = _field(project, "agent")
    if agent is not None:
        return [agent]
    return []


def normalize_project(project: Any, source: Optional[str] = None) -> ProjectDescriptor:
    """Normalize ``{agents: [...]}`` or ``{agent: {...}}`` into a ProjectDescriptor.

    Agents whose character cannot be parsed are skipped with a warning.
    """
    agents: List[ProjectAgent] = []
    for index, spec in enumerate(_agent_specs(project)):
        try:
            character = _to_character(_field(spec, "character"))
        except (CharacterLoadError, ValidationError) as e:
            logger.warning(f"Skipping project agent #{index + 1}: {e}")
            continue
        plugins = _field(spec, "plugins") or []
        if isinstance(plugins, str):
            plugins = [plugins]
        elif not isinstance(plugins, (list, tuple)):
            logger.warning(f"Skipping project agent #{index + 1}: plugins must be a list, got {type(plugins).__name__}")
            continue
        init = _field(spec, "init")
        agents.append(
            ProjectAgent(
                character=character,
                plugins=list(plugins),
                init=init if callable(init) else None,
            )
        )
    return ProjectDescriptor(agents=agents, source=source)
