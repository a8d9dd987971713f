"""Exception hierarchy for the Eliza CLI."""

from typing import Optional


class ElizaError(Exception):
    """Base exception for the Eliza CLI."""

    pass


class ConfigurationError(ElizaError):
    """Raised when persisted or environment configuration is invalid."""

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class PromptUnavailableError(ElizaError):
    """Raised when interactive input is required but stdin is not a terminal."""

    pass


class CharacterLoadError(ElizaError):
    """Raised when a character cannot be loaded from a path or URL."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load character from {source}: {reason}")
        self.source = source
        self.reason = reason


class DiscoveryError(ElizaError):
    """Raised when a project or plugin module cannot be loaded."""

    pass


class StorageError(ElizaError):
    """Raised when the agent store cannot be opened or written."""

    pass
