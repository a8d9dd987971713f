"""
Server and storage settings.

``ServerSettings`` follows the pydantic ``load_env_vars`` pattern used by the
adapter configs; ``StorageConfig`` is handed by value to the storage layer.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from eliza_cli.constants import DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT

logger = logging.getLogger(__name__)


class ServerSettings(BaseModel):
    """Configuration for the agent HTTP server."""

    host: str = Field(DEFAULT_SERVER_HOST, description="Interface to bind")
    port: int = Field(DEFAULT_SERVER_PORT, description="Default listen port")
    access_log: bool = Field(False, description="Enable uvicorn access logging")

    model_config = ConfigDict(extra="forbid")

    def load_env_vars(self) -> None:
        """Load configuration from environment variables."""
        if os.environ.get("SERVER_HOST"):
            self.host = os.environ["SERVER_HOST"]

        if os.environ.get("SERVER_PORT"):
            try:
                self.port = int(os.environ["SERVER_PORT"])
            except ValueError:
                logger.warning(f"Invalid SERVER_PORT value: {os.environ['SERVER_PORT']}")


class StorageConfig(BaseModel):
    """Storage backing for agent state.

    ``postgres_url`` selects PostgreSQL; otherwise a SQLite file under
    ``data_dir`` is used.
    """

    data_dir: Path = Field(..., description="Managed database directory")
    postgres_url: Optional[str] = Field(None, description="PostgreSQL connection URL")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_environment(cls, default_data_dir: Path) -> "StorageConfig":
        """Build from POSTGRES_URL / PGLITE_DATA_DIR, falling back to the managed dir."""
        data_dir = os.environ.get("PGLITE_DATA_DIR") or default_data_dir
        postgres_url = os.environ.get("POSTGRES_URL") or None
        return cls(data_dir=Path(data_dir).expanduser(), postgres_url=postgres_url)

    @property
    def connection_string(self) -> str:
        if self.postgres_url:
            return self.postgres_url
        return str(self.data_dir / "agents.db")


__all__ = ["ServerSettings", "StorageConfig"]
