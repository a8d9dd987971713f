"""Shared utilities: errors, logging setup and top-level error handling."""

from .errors import (
    CharacterLoadError,
    ConfigurationError,
    DiscoveryError,
    ElizaError,
    PromptUnavailableError,
    StorageError,
)

__all__ = [
    "CharacterLoadError",
    "ConfigurationError",
    "DiscoveryError",
    "ElizaError",
    "PromptUnavailableError",
    "StorageError",
]
