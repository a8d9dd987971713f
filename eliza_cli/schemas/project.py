"""
Project and discovery schemas.

Project agents carry live Python objects (plugin instances, init callables),
so they are plain dataclasses rather than pydantic models.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List, Optional, Union

from eliza_cli.constants import MANIFEST_SECTION

from .character import Character

if TYPE_CHECKING:
    from eliza_cli.protocols.plugin import Plugin

# Custom per-agent initializer: receives the runtime before it initializes
AgentInit = Callable[[Any], Union[None, Awaitable[None]]]


@dataclass
class ProjectAgent:
    """One agent declared by a project."""

    character: Character
    plugins: List[Any] = field(default_factory=list)
    init: Optional[AgentInit] = None

    @property
    def name(self) -> str:
        return self.character.name


@dataclass
class ProjectDescriptor:
    """A project normalized to a list of agents."""

    agents: List[ProjectAgent] = field(default_factory=list)
    source: Optional[str] = None


@dataclass
class RawModule:
    """What a module loader hands back: the default export plus named exports."""

    default: Any = None
    exports: Dict[str, Any] = field(default_factory=dict)
    path: Optional[str] = None


@dataclass
class PackageManifest:
    """The fields of ``package.json`` discovery cares about."""

    name: Optional[str] = None
    main: Optional[str] = None
    description: Optional[str] = None
    component_type: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "PackageManifest":
        section = data.get(MANIFEST_SECTION)
        component_type = section.get("type") if isinstance(section, dict) else None
        return cls(
            name=data.get("name") if isinstance(data.get("name"), str) else None,
            main=data.get("main") if isinstance(data.get("main"), str) else None,
            description=data.get("description") if isinstance(data.get("description"), str) else None,
            component_type=component_type if isinstance(component_type, str) else None,
        )


class DiscoveryKind(str, Enum):
    PROJECT = "project"
    PLUGIN = "plugin"
    NONE = "none"


@dataclass(frozen=True)
class DiscoveryResult:
    """Outcome of inspecting the working directory.

    ``PROJECT`` may come without a usable descriptor and ``PLUGIN`` without a
    loaded module; both then degrade to the synthesized character.
    """

    kind: DiscoveryKind
    project: Optional[ProjectDescriptor] = None
    plugin_module: Optional["Plugin"] = None

    @property
    def is_project(self) -> bool:
        return self.kind == DiscoveryKind.PROJECT

    @property
    def is_plugin(self) -> bool:
        return self.kind == DiscoveryKind.PLUGIN

    @classmethod
    def none(cls) -> "DiscoveryResult":
        return cls(kind=DiscoveryKind.NONE)


@dataclass
class PluginSpec:
    """A plugin declared as a mapping (``{"name": ..., "init": ...}``)."""

    name: str
    init_hook: Callable[..., Any]
    description: Optional[str] = None

    def init(self, config: Dict[str, Any], runtime: Any) -> Any:
        return self.init_hook(config, runtime)
