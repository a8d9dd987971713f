"""Agent state persistence (SQLite or PostgreSQL)."""

from .agent_store import AgentStore
from .dialect import Dialect, DialectAdapter

__all__ = ["AgentStore", "Dialect", "DialectAdapter"]
