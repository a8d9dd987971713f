"""
ModuleLoader Protocol.

Abstracts loading a project's entry-point file so discovery can be exercised
with fixed fixtures instead of real dynamic imports.
"""

from pathlib import Path
from typing import Protocol

from eliza_cli.schemas.project import RawModule


class ModuleLoader(Protocol):
    """Loads an entry-point file and returns its exports."""

    def load(self, path: Path) -> RawModule:
        """Load ``path``.

        Raises:
            DiscoveryError: If the file cannot be imported.
        """
        ...
