"""
Agent server.

Hosts registered agent runtimes behind a small FastAPI app served by uvicorn,
and exposes the lifecycle hooks the HTTP routes use to start and stop agents.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional

import uvicorn
from fastapi import Body, FastAPI, HTTPException
from fastapi.staticfiles import StaticFiles
from uvicorn import Server

from eliza_cli.constants import CLIENT_ROUTE, ELIZA_VERSION
from eliza_cli.logic.character.loader import json_to_character, load_character_try_path
from eliza_cli.logic.config.settings import ServerSettings, StorageConfig
from eliza_cli.logic.persistence.agent_store import AgentStore
from eliza_cli.logic.runtime.agent_runtime import AgentRuntime
from eliza_cli.logic.runtime.lifecycle import start_agent, stop_agent
from eliza_cli.logic.utils.errors import CharacterLoadError, ElizaError

logger = logging.getLogger(__name__)

SERVER_STARTUP_POLL_SECONDS = 0.05
SERVER_SHUTDOWN_TIMEOUT_SECONDS = 5.0


def _agent_summary(runtime: AgentRuntime) -> Dict[str, Any]:
    return {
        "id": runtime.agent_id,
        "name": runtime.character.name,
        "status": runtime.state.value,
        "plugins": runtime.character.plugin_names,
    }


class AgentServer:
    """HTTP host for agent runtimes."""

    def __init__(self, storage_config: StorageConfig, settings: Optional[ServerSettings] = None) -> None:
        self.storage_config = storage_config
        self.settings = settings or ServerSettings()
        self.store = AgentStore(storage_config)
        self.agents: Dict[str, AgentRuntime] = {}
        self.client_path: Optional[Path] = None

        # Lifecycle hooks; replaced by the start command before routes are served
        self.start_agent: Callable[..., Awaitable[AgentRuntime]] = start_agent
        self.stop_agent: Callable[..., Awaitable[None]] = stop_agent
        self.load_character_try_path = load_character_try_path
        self.json_to_character = json_to_character

        self.app = self._create_app()
        self._server: Optional[Server] = None
        self._server_task: Optional["asyncio.Task[None]"] = None
        self.port: Optional[int] = None

    def _create_app(self) -> FastAPI:
        app = FastAPI(title="Eliza Agent Server", version=ELIZA_VERSION)

        @app.get("/health")
        def health() -> Dict[str, Any]:
            return {"status": "ok", "agents": len(self.agents)}

        @app.get("/api/agents")
        def list_agents() -> Dict[str, List[Dict[str, Any]]]:
            return {"agents": [_agent_summary(runtime) for runtime in self.agents.values()]}

        @app.post("/api/agents", status_code=201)
        async def create_agent(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
            try:
                character = self.json_to_character(payload)
            except CharacterLoadError as e:
                raise HTTPException(status_code=400, detail=str(e))
            if character.id and character.id in self.agents:
                raise HTTPException(status_code=409, detail=f"Agent {character.name} is already running")
            try:
                runtime = await self.start_agent(character, self)
            except Exception as e:
                logger.error(f"Failed to start agent {character.name}: {e}")
                raise HTTPException(status_code=500, detail=f"Failed to start agent: {e}")
            return _agent_summary(runtime)

        @app.delete("/api/agents/{agent_id}")
        async def delete_agent(agent_id: str) -> Dict[str, str]:
            runtime = self.agents.get(agent_id)
            if runtime is None:
                raise HTTPException(status_code=404, detail=f"Agent {agent_id} not found")
            await self.stop_agent(runtime, self)
            return {"id": agent_id, "status": "stopped"}

        return app

    def register_agent(self, runtime: AgentRuntime) -> None:
        self.agents[runtime.agent_id] = runtime
        logger.info(f"Registered agent {runtime.character.name} ({runtime.agent_id})")

    def unregister_agent(self, agent_id: str) -> None:
        runtime = self.agents.pop(agent_id, None)
        if runtime is not None:
            logger.info(f"Unregistered agent {runtime.character.name} ({agent_id})")

    def set_client_path(self, client_path: Path) -> None:
        """Serve the web client bundle at ``/client``."""
        self.client_path = client_path
        self.app.mount(CLIENT_ROUTE, StaticFiles(directory=str(client_path), html=True), name="client")

    async def start(self, port: int, host: Optional[str] = None) -> None:
        """Start serving on ``host:port`` and return once the socket is bound."""
        host = host or self.settings.host
        config = uvicorn.Config(
            app=self.app,
            host=host,
            port=port,
            log_level="info" if self.settings.access_log else "warning",
            access_log=self.settings.access_log,
        )
        self._server = Server(config)
        self._server_task = asyncio.create_task(self._server.serve())

        while not self._server.started:
            if self._server_task.done():
                try:
                    self._server_task.result()
                except Exception as e:
                    raise ElizaError(f"Server failed to start on {host}:{port}: {e}") from e
                raise ElizaError(f"Server exited before binding {host}:{port}")
            await asyncio.sleep(SERVER_STARTUP_POLL_SECONDS)

        self.port = port
        logger.info(f"Server listening on http://{host}:{port}")

    async def serve_forever(self) -> None:
        """Wait for the server to exit, then stop every agent."""
        try:
            if self._server_task is not None:
                await self._server_task
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Stop the HTTP server and close every registered runtime."""
        if self._server is not None:
            self._server.should_exit = True
            if self._server_task is not None and not self._server_task.done():
                try:
                    await asyncio.wait_for(self._server_task, timeout=SERVER_SHUTDOWN_TIMEOUT_SECONDS)
                except asyncio.TimeoutError:
                    self._server_task.cancel()
                    try:
                        await self._server_task
                    except asyncio.CancelledError:
                        pass
            self._server = None

        for runtime in list(self.agents.values()):
            try:
                await self.stop_agent(runtime, self)
            except Exception as e:
                logger.error(f"Error stopping agent {runtime.character.name}: {e}")

        self.store.close()
        logger.info("Agent server stopped")
