"""
Agent registry persistence.

Records which agents were started and stopped. Backed by a SQLite file in the
managed data directory, or PostgreSQL when a URL is configured.
"""

import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from eliza_cli.logic.config.settings import StorageConfig
from eliza_cli.logic.utils.errors import StorageError

from .dialect import DialectAdapter

logger = logging.getLogger(__name__)

# Try to import psycopg2 for PostgreSQL support
try:
    import psycopg2
    import psycopg2.extras

    POSTGRES_AVAILABLE = True
except ImportError:
    POSTGRES_AVAILABLE = False
    logger.debug("psycopg2 not available - PostgreSQL support disabled")

AGENTS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS agents (
    agent_id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    character_json TEXT NOT NULL,
    status TEXT NOT NULL,
    started_at TEXT,
    stopped_at TEXT
)
"""

_AGENT_COLUMNS = ["agent_id", "name", "character_json", "status", "started_at", "stopped_at"]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class AgentStore:
    """Small persistence facade shared by every runtime on one server."""

    def __init__(self, config: StorageConfig) -> None:
        self.config = config
        self.adapter = DialectAdapter(config.connection_string)
        self._conn: Optional[Any] = None

    def _connect(self) -> Any:
        if self.adapter.is_postgresql():
            if not POSTGRES_AVAILABLE:
                raise StorageError(
                    "PostgreSQL connection requested but psycopg2 not installed. "
                    "Install with: pip install psycopg2-binary"
                )
            conn = psycopg2.connect(self.adapter.db_url)
            conn.cursor_factory = psycopg2.extras.RealDictCursor
            return conn

        db_path = Path(self.adapter.db_path or self.config.connection_string)
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(db_path), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Connect and create the schema. Safe to call more than once."""
        if self._conn is not None:
            return
        try:
            self._conn = self._connect()
            self._execute(AGENTS_TABLE_SQL)
        except StorageError:
            raise
        except Exception as e:
            self._conn = None
            raise StorageError(f"Cannot open agent store at {self.config.connection_string}: {e}") from e
        logger.info(f"Agent store ready ({self.adapter.dialect.value})")

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None

    def _execute(self, sql: str, params: tuple = ()) -> List[Dict[str, Any]]:
        if self._conn is None:
            raise StorageError("Agent store is not open")
        cursor = self._conn.cursor()
        try:
            cursor.execute(self.adapter.translate_placeholders(sql), params)
            rows = cursor.fetchall() if cursor.description else []
            self._conn.commit()
        finally:
            cursor.close()
        return [dict(row) for row in rows]

    def record_agent_started(self, agent_id: str, name: str, character_json: str) -> None:
        sql = self.adapter.upsert("agents", _AGENT_COLUMNS, ["agent_id"])
        self._execute(sql, (agent_id, name, character_json, "active", _now_iso(), None))

    def record_agent_stopped(self, agent_id: str) -> None:
        self._execute(
            "UPDATE agents SET status = ?, stopped_at = ? WHERE agent_id = ?",
            ("inactive", _now_iso(), agent_id),
        )

    def get_agent(self, agent_id: str) -> Optional[Dict[str, Any]]:
        rows = self._execute("SELECT * FROM agents WHERE agent_id = ?", (agent_id,))
        return rows[0] if rows else None

    def list_agents(self) -> List[Dict[str, Any]]:
        return self._execute("SELECT * FROM agents ORDER BY name")
