"""Agent server and port allocation."""

from .agent_server import AgentServer
from .ports import find_available_port, is_port_available

__all__ = ["AgentServer", "find_available_port", "is_port_available"]
