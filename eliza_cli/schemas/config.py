"""User configuration schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserConfig(BaseModel):
    """Persisted selection of enabled services and AI models.

    Serialized with camelCase keys. ``is_default`` is only ever True for the
    in-memory fallback returned when nothing has been saved yet.
    """

    services: List[str] = Field(default_factory=list, description="Enabled service plugins")
    ai_models: List[str] = Field(default_factory=list, alias="aiModels", description="Enabled AI model plugins")
    last_updated: Optional[str] = Field(None, alias="lastUpdated", description="ISO timestamp of last save")
    is_default: bool = Field(False, alias="isDefault", description="True when no configuration was saved")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def default(cls) -> "UserConfig":
        return cls(services=[], ai_models=[], last_updated=None, is_default=True)

    def to_storage(self) -> dict:
        """Dump for the config file (``isDefault`` is never persisted)."""
        return self.model_dump(by_alias=True, exclude={"is_default"})


class ServiceSelection(BaseModel):
    """Result of the interactive service/model selection."""

    services: List[str] = Field(default_factory=list)
    ai_models: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
