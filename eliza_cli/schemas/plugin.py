"""
Known-plugin catalogue schemas.

These describe plugins the CLI can offer during configuration and the
environment variables each one needs before an agent can use it.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PluginCategory(str, Enum):
    """What role a known plugin plays for an agent."""

    DATABASE = "database"
    SERVICE = "service"
    AI_MODEL = "ai_model"


class EnvVarSpec(BaseModel):
    """An environment variable a plugin reads."""

    name: str = Field(..., description="Environment variable name")
    description: str = Field(..., description="Prompt text shown to the user")
    required: bool = Field(True, description="Whether the plugin cannot run without it")
    secret: bool = Field(False, description="Hide input when prompting")

    model_config = ConfigDict(extra="forbid", frozen=True)


class PluginDefinition(BaseModel):
    """A plugin the CLI knows how to configure."""

    name: str = Field(..., description="Short plugin name (e.g. 'discord')")
    display_name: str = Field(..., description="Human-readable name")
    category: PluginCategory = Field(..., description="Plugin category")
    package: str = Field(..., description="Package reference placed in a character's plugin list")
    description: str = Field("", description="One-line description")
    env_vars: List[EnvVarSpec] = Field(default_factory=list, description="Environment variables read")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def required_env_vars(self) -> List[EnvVarSpec]:
        return [var for var in self.env_vars if var.required]
