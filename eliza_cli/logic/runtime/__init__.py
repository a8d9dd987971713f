"""Agent runtime and lifecycle management."""

from .agent_runtime import AgentRuntime, RuntimeState
from .lifecycle import start_agent, stop_agent

__all__ = ["AgentRuntime", "RuntimeState", "start_agent", "stop_agent"]
