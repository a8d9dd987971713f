"""
Database dialect adapter for SQLite and PostgreSQL compatibility.

The connection string decides the dialect; queries are written with SQLite
``?`` placeholders and translated for PostgreSQL.
"""

from enum import Enum
from typing import Optional
from urllib.parse import urlparse


class Dialect(str, Enum):
    """Supported database dialects."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class DialectAdapter:
    """Translates SQL between SQLite and PostgreSQL dialects."""

    def __init__(self, connection_string: str):
        parsed = urlparse(connection_string)

        if parsed.scheme in ("postgresql", "postgres"):
            self.dialect = Dialect.POSTGRESQL
            self.db_url = connection_string
            self.db_path: Optional[str] = None
        elif parsed.scheme in ("sqlite", "sqlite3"):
            self.dialect = Dialect.SQLITE
            self.db_path = parsed.path or connection_string
            self.db_url = connection_string
        else:
            # Plain filesystem path
            self.dialect = Dialect.SQLITE
            self.db_path = connection_string
            self.db_url = connection_string

    def is_postgresql(self) -> bool:
        return self.dialect == Dialect.POSTGRESQL

    def translate_placeholders(self, sql: str) -> str:
        """``?`` -> ``%s`` for PostgreSQL."""
        if self.is_postgresql():
            return sql.replace("?", "%s")
        return sql

    def upsert(self, table: str, columns: list[str], conflict_columns: list[str]) -> str:
        """Generate an UPSERT statement for the target dialect."""
        update_columns = [col for col in columns if col not in conflict_columns]
        placeholders = ", ".join("?" for _ in columns)
        cols = ", ".join(columns)

        if not self.is_postgresql():
            return f"INSERT OR REPLACE INTO {table} ({cols}) VALUES ({placeholders})"

        updates = ", ".join(f"{col} = EXCLUDED.{col}" for col in update_columns)
        conflict = ", ".join(conflict_columns)
        sql = f"INSERT INTO {table} ({cols}) VALUES ({placeholders}) ON CONFLICT ({conflict}) DO UPDATE SET {updates}"
        return self.translate_placeholders(sql)
