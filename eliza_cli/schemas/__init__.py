"""Typed schemas for the Eliza CLI."""

from .character import Character, PluginReference, PluginRef, plugin_ref_name
from .config import ServiceSelection, UserConfig
from .plugin import EnvVarSpec, PluginCategory, PluginDefinition
from .project import (
    DiscoveryKind,
    DiscoveryResult,
    PackageManifest,
    PluginSpec,
    ProjectAgent,
    ProjectDescriptor,
    RawModule,
)

__all__ = [
    "Character",
    "DiscoveryKind",
    "DiscoveryResult",
    "EnvVarSpec",
    "PackageManifest",
    "PluginCategory",
    "PluginDefinition",
    "PluginRef",
    "PluginSpec",
    "PluginReference",
    "ProjectAgent",
    "ProjectDescriptor",
    "RawModule",
    "ServiceSelection",
    "UserConfig",
    "plugin_ref_name",
]
