"""Configuration: persisted selections, plugin registry, env and server settings."""

from .config_manager import ConfigManager
from .settings import ServerSettings, StorageConfig

__all__ = ["ConfigManager", "ServerSettings", "StorageConfig"]
