"""
``eliza start``: bootstrap and serve agents from the current directory.

The bootstrap runs strictly in order: ensure the profile directories, load the
profile ``.env``, make sure the database plugin is configured, load or prompt
for the service selection, resolve credentials for every selected plugin,
synthesize the fallback character, discover a project or plugin in the working
directory, start the agents, then bind the server to the first free port.
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import click

from eliza_cli.constants import AGENT_START_DELAY_SECONDS, CLIENT_ROUTE, DATABASE_PLUGIN, MAX_SERVER_PORT
from eliza_cli.logic.character.generator import generate_custom_character
from eliza_cli.logic.character.loader import json_to_character, load_character_try_path
from eliza_cli.logic.config.config_manager import ConfigManager
from eliza_cli.logic.config.env_utils import load_env_file
from eliza_cli.logic.config.plugin_registry import simple_plugin_name
from eliza_cli.logic.config.settings import ServerSettings, StorageConfig
from eliza_cli.logic.discovery.discoverer import ProjectDiscoverer
from eliza_cli.logic.runtime.agent_runtime import AgentRuntime
from eliza_cli.logic.runtime.lifecycle import start_agent, stop_agent
from eliza_cli.logic.server.agent_server import AgentServer
from eliza_cli.logic.server.ports import find_available_port
from eliza_cli.logic.setup.env_prompt import EnvPrompter
from eliza_cli.logic.setup.first_run import ensure_user_directories
from eliza_cli.logic.utils.errors import CharacterLoadError, ConfigurationError, PromptUnavailableError
from eliza_cli.logic.utils.handle_error import handle_error
from eliza_cli.logic.utils.logging_config import setup_basic_logging
from eliza_cli.logic.utils.path_resolution import (
    get_client_build_candidates,
    get_client_source_dir,
    get_db_dir,
    get_eliza_home,
    get_env_file_path,
    get_logs_dir,
)
from eliza_cli.protocols.module_loader import ModuleLoader
from eliza_cli.schemas.character import Character
from eliza_cli.schemas.config import UserConfig
from eliza_cli.schemas.project import DiscoveryResult, ProjectDescriptor

logger = logging.getLogger(__name__)


@dataclass
class StartOptions:
    """Options of the ``start`` command."""

    port: Optional[int] = None
    configure: bool = False
    dev: bool = False
    character: Optional[Character] = None


def _prompt_env_safely(prompter: EnvPrompter, plugin_name: str) -> None:
    try:
        prompter.prompt_for_env_vars(plugin_name)
    except Exception as e:
        logger.warning(f"Failed to configure {plugin_name} environment variables: {e}")


def _load_or_prompt_config(
    config_manager: ConfigManager,
    prompter: EnvPrompter,
    configure: bool,
) -> UserConfig:
    """Return the stored selection, prompting first on first run or ``--configure``.

    The configuration is only saved after a complete selection.
    """
    config = config_manager.load_config()
    if not configure and not config.is_default:
        return config

    config_manager.display_config_status()
    try:
        selection = prompter.prompt_for_services()
    except PromptUnavailableError as e:
        logger.warning(f"Skipping service configuration: {e}")
        return config

    config = UserConfig(
        services=selection.services,
        ai_models=selection.ai_models,
        last_updated=datetime.now(timezone.utc).isoformat(),
    )
    config_manager.save_config(config)
    return config


def selected_plugin_names(config: UserConfig) -> List[str]:
    """Database plugin, then services, then AI models, without duplicates."""
    names: List[str] = []
    for name in [DATABASE_PLUGIN, *config.services, *config.ai_models]:
        if name not in names:
            names.append(name)
    return names


def _resolve_selected_plugin_env(config: UserConfig, config_manager: ConfigManager, prompter: EnvPrompter) -> None:
    # Status is taken once, before any prompting
    status = config_manager.get_plugin_status()
    for name in selected_plugin_names(config):
        if status.get(name) is True:
            continue
        _prompt_env_safely(prompter, name)


async def _start_project_agents(
    project: ProjectDescriptor,
    fallback_character: Character,
    server: AgentServer,
    prompter: EnvPrompter,
) -> List[AgentRuntime]:
    prompter.prompt_for_project_plugins(project)

    started: List[AgentRuntime] = []
    for index, agent in enumerate(project.agents):
        if index > 0:
            await asyncio.sleep(AGENT_START_DELAY_SECONDS)
        try:
            logger.info(f"Starting agent: {agent.name}")
            runtime = await server.start_agent(agent.character, server, agent.init, agent.plugins)
        except Exception as e:
            logger.error(f"Failed to start agent {agent.name}: {e}")
            continue
        started.append(runtime)

    if not started:
        logger.warning("Failed to start any agents from project, falling back to custom character")
        started.append(await server.start_agent(fallback_character, server))
    else:
        logger.info(f"Successfully started {len(started)} agents from project")
    return started


async def _start_plugin_agent(
    discovery: DiscoveryResult,
    fallback_character: Character,
    server: AgentServer,
    prompter: EnvPrompter,
) -> AgentRuntime:
    plugin = discovery.plugin_module
    if plugin is None:
        logger.warning("Plugin detected but could not be loaded, starting custom character without it")
        return await server.start_agent(fallback_character, server)

    _prompt_env_safely(prompter, simple_plugin_name(plugin.name))
    logger.info(f"Starting custom character with plugin: {plugin.name}")
    return await server.start_agent(fallback_character, server, None, [plugin])


async def start_discovered_agents(
    discovery: DiscoveryResult,
    fallback_character: Character,
    server: AgentServer,
    prompter: EnvPrompter,
) -> List[AgentRuntime]:
    """Start agents for the discovered directory: project, then plugin, then fallback."""
    if discovery.is_project and discovery.project is not None:
        return await _start_project_agents(discovery.project, fallback_character, server, prompter)
    if discovery.is_plugin:
        return [await _start_plugin_agent(discovery, fallback_character, server, prompter)]
    logger.info("Starting custom character")
    return [await server.start_agent(fallback_character, server)]


def find_client_build() -> Optional[Path]:
    """First existing client bundle: packaged, then development checkout."""
    for candidate in get_client_build_candidates():
        if (candidate / "index.html").exists():
            return candidate
    return None


def _install_server_hooks(server: AgentServer) -> None:
    server.start_agent = start_agent
    server.stop_agent = stop_agent
    server.load_character_try_path = load_character_try_path
    server.json_to_character = json_to_character


async def start_agents(
    options: StartOptions,
    *,
    cwd: Optional[Path] = None,
    home: Optional[Path] = None,
    module_loader: Optional[ModuleLoader] = None,
    server: Optional[AgentServer] = None,
    prompter: Optional[EnvPrompter] = None,
    config_manager: Optional[ConfigManager] = None,
) -> AgentServer:
    """Run the bootstrap and return the listening server."""
    home = home or get_eliza_home()
    cwd = cwd or Path.cwd()

    ensure_user_directories(home)

    env_file = get_env_file_path(home)
    if load_env_file(env_file):
        logger.debug(f"Loaded environment from {env_file}")

    prompter = prompter or EnvPrompter(home=home)
    config_manager = config_manager or ConfigManager(home=home)

    _prompt_env_safely(prompter, DATABASE_PLUGIN)

    config = _load_or_prompt_config(config_manager, prompter, options.configure)
    _resolve_selected_plugin_env(config, config_manager, prompter)

    fallback_character = options.character or generate_custom_character(config.services, config.ai_models)

    settings = ServerSettings()
    settings.load_env_vars()
    if options.dev:
        settings.access_log = True

    requested_port = options.port or settings.port
    if not 0 < requested_port <= MAX_SERVER_PORT:
        raise ConfigurationError(f"Invalid port {requested_port}: expected 1-{MAX_SERVER_PORT}")

    if server is None:
        server = AgentServer(StorageConfig.from_environment(get_db_dir(home)), settings)
    _install_server_hooks(server)

    discovery = ProjectDiscoverer(module_loader=module_loader).discover(cwd)
    await start_discovered_agents(discovery, fallback_character, server, prompter)

    port = find_available_port(requested_port, settings.host)

    client_path = find_client_build()
    if client_path is not None:
        server.set_client_path(client_path)

    await server.start(port, settings.host)

    if port != requested_port:
        logger.warning(f"Port {requested_port} was in use, server started on alternate port {port}")

    if client_path is not None:
        logger.info(f"Client UI is available at http://localhost:{port}{CLIENT_ROUTE}")
    else:
        logger.warning(
            f"No client build found. Build it with 'npm run build' in {get_client_source_dir()} "
            f"to serve the web UI at {CLIENT_ROUTE}"
        )

    return server


async def _run(options: StartOptions) -> None:
    server = await start_agents(options)
    await server.serve_forever()


@click.command()
@click.option("-p", "--port", type=int, default=None, help="Port to listen on (default: SERVER_PORT or 3000)")
@click.option("-c", "--configure", is_flag=True, default=False, help="Reconfigure services and AI models")
@click.option("--dev", is_flag=True, default=False, help="Development mode: debug logging, log file and access log")
@click.option("--character", "character_source", default=None, help="Character file path or URL to run")
def start(port: Optional[int], configure: bool, dev: bool, character_source: Optional[str]) -> None:
    """Start the agent server."""
    setup_basic_logging(
        level=logging.DEBUG if dev else None,
        log_to_file=dev,
        log_dir=get_logs_dir(get_eliza_home()),
    )

    options = StartOptions(port=port, configure=configure, dev=dev)

    if character_source:
        try:
            options.character = asyncio.run(load_character_try_path(character_source))
        except CharacterLoadError as e:
            logger.error(str(e))
            sys.exit(1)

    try:
        asyncio.run(_run(options))
    except KeyboardInterrupt:
        logger.info("Interrupted by user, shutting down")
    except SystemExit:
        raise
    except Exception as e:
        handle_error(e)
