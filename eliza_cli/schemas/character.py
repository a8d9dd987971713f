"""
Character schemas.

A character is the serializable persona consumed by an agent runtime. Unknown
keys from character files are kept so that plugins can read their own
sections.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PluginReference(BaseModel):
    """A plugin named in a character, with optional init configuration."""

    name: str = Field(..., description="Plugin package or short name")
    init: Optional[Dict[str, Any]] = Field(None, description="Configuration passed to the plugin's init hook")

    model_config = ConfigDict(extra="forbid")


PluginRef = Union[str, PluginReference]


def plugin_ref_name(ref: PluginRef) -> str:
    """Name of a plugin reference, whether bare or structured."""
    if isinstance(ref, PluginReference):
        return ref.name
    return ref


class Character(BaseModel):
    """Agent persona definition."""

    id: Optional[str] = Field(None, description="Agent id; derived from name when absent")
    name: str = Field(..., min_length=1, description="Display name")
    username: Optional[str] = Field(None, description="Handle used by messaging services")
    system: Optional[str] = Field(None, description="System prompt")
    bio: Union[str, List[str]] = Field(default_factory=list, description="Biography lines")
    topics: List[str] = Field(default_factory=list)
    adjectives: List[str] = Field(default_factory=list)
    plugins: List[PluginRef] = Field(default_factory=list, description="Plugins this character uses")
    settings: Dict[str, Any] = Field(default_factory=dict, description="Free-form settings, incl. 'secrets'")

    model_config = ConfigDict(extra="allow")

    @property
    def plugin_names(self) -> List[str]:
        return [plugin_ref_name(ref) for ref in self.plugins]

    def plugin_init_config(self, plugin_name: str) -> Dict[str, Any]:
        """Init configuration declared for ``plugin_name``, or an empty dict."""
        for ref in self.plugins:
            if isinstance(ref, PluginReference) and ref.name == plugin_name and ref.init:
                return dict(ref.init)
        return {}

    @property
    def secrets(self) -> Dict[str, Any]:
        secrets = self.settings.get("secrets")
        return secrets if isinstance(secrets, dict) else {}
