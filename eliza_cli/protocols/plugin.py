"""
Plugin Protocol.

A plugin is any object with a ``name`` and an ``init`` hook. The hook receives
the plugin's init configuration and the runtime it is being attached to and
may be a coroutine function.
"""

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class Plugin(Protocol):
    """Protocol that runtime plugins must satisfy."""

    name: str

    def init(self, config: Dict[str, Any], runtime: Any) -> Any:
        """Attach the plugin to ``runtime``; may return an awaitable."""
        ...
