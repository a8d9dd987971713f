"""
Agent lifecycle: construct, initialize, register, and tear down runtimes.
"""

import inspect
import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

from eliza_cli.logic.utils.identifiers import string_to_uuid
from eliza_cli.schemas.character import Character
from eliza_cli.schemas.project import AgentInit

from .agent_runtime import AgentRuntime

if TYPE_CHECKING:
    from eliza_cli.logic.server.agent_server import AgentServer

logger = logging.getLogger(__name__)


async def start_agent(
    character: Character,
    server: "AgentServer",
    init: Optional[AgentInit] = None,
    plugins: Sequence[Any] = (),
) -> AgentRuntime:
    """Start an agent and register it with the server.

    Args:
        character: The character the agent runs as; an id is derived from its name if absent.
        server: Server the agent is registered with.
        init: Optional custom initializer, awaited before the runtime initializes.
        plugins: Plugin objects or plugin names for the agent.

    Returns:
        The initialized runtime.

    Raises:
        Exception: Anything raised by ``init`` or plugin initialization propagates.
    """
    if not character.id:
        character.id = string_to_uuid(character.name)

    runtime = AgentRuntime(character=character, plugins=plugins, store=server.store)
    if init is not None:
        result = init(runtime)
        if inspect.isawaitable(result):
            await result

    await runtime.initialize()

    server.register_agent(runtime)
    logger.debug(f"Started {runtime.character.name} as {runtime.agent_id}")
    return runtime


async def stop_agent(runtime: AgentRuntime, server: "AgentServer") -> None:
    """Close the runtime, then unregister it from the server."""
    try:
        await runtime.close()
    finally:
        server.unregister_agent(runtime.agent_id)
