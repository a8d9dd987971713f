"""
Interactive prompting for plugin credentials and service selection.

Values entered here are exported into the current process and persisted to the
profile's ``.env`` file so later runs pick them up without asking again.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from eliza_cli.constants import DATABASE_PLUGIN
from eliza_cli.logic.config.env_utils import is_env_var_set, persist_env_var
from eliza_cli.logic.config.plugin_registry import get_plugins_by_category, get_required_env_vars, simple_plugin_name
from eliza_cli.logic.utils.errors import PromptUnavailableError
from eliza_cli.logic.utils.path_resolution import get_eliza_home, get_env_file_path
from eliza_cli.schemas.config import ServiceSelection
from eliza_cli.schemas.plugin import PluginCategory, PluginDefinition
from eliza_cli.schemas.project import ProjectDescriptor

from .first_run import is_interactive_environment

logger = logging.getLogger(__name__)


class EnvPrompter:
    """Asks the user for missing plugin environment variables and selections."""

    def __init__(
        self,
        home: Optional[Path] = None,
        console: Optional[Console] = None,
        interactive_check: Callable[[], bool] = is_interactive_environment,
    ) -> None:
        self.home = home or get_eliza_home()
        self.env_file = get_env_file_path(self.home)
        self.console = console or Console()
        self._interactive_check = interactive_check

    def _require_interactive(self, reason: str) -> None:
        if not self._interactive_check():
            raise PromptUnavailableError(f"Interactive input required to {reason}, but no terminal is attached")

    def prompt_for_env_vars(self, plugin_name: str) -> List[str]:
        """Prompt for every required variable of ``plugin_name`` that is unset.

        Already-set variables are never asked for again.

        Returns:
            Names of the variables that were set by this call.

        Raises:
            PromptUnavailableError: If input is needed but the session is not interactive.
        """
        missing = [var for var in get_required_env_vars(plugin_name) if not is_env_var_set(var.name)]
        if not missing:
            return []

        self._require_interactive(f"configure {plugin_name}")
        self.console.print(f"[bold]{plugin_name}[/bold] needs {len(missing)} setting(s).")

        configured: List[str] = []
        for var in missing:
            value = ""
            while not value:
                value = Prompt.ask(f"{var.description} ({var.name})", password=var.secret, console=self.console)
                value = (value or "").strip()
                if not value:
                    self.console.print(f"[yellow]{var.name} is required.[/yellow]")
            persist_env_var(self.env_file, var.name, value)
            configured.append(var.name)
            logger.debug(f"Saved {var.name} to {self.env_file}")

        return configured

    def prompt_for_services(self) -> ServiceSelection:
        """Let the user pick service and AI model plugins. Empty selections are allowed.

        Raises:
            PromptUnavailableError: If the session is not interactive.
        """
        self._require_interactive("select services and AI models")

        services = self._prompt_selection(
            "Services",
            get_plugins_by_category(PluginCategory.SERVICE),
        )
        ai_models = self._prompt_selection(
            "AI models",
            get_plugins_by_category(PluginCategory.AI_MODEL),
        )
        return ServiceSelection(services=services, ai_models=ai_models)

    def _prompt_selection(self, title: str, options: Sequence[PluginDefinition]) -> List[str]:
        table = Table(title=title)
        table.add_column("#", justify="right")
        table.add_column("Plugin")
        table.add_column("Description")
        for index, option in enumerate(options, start=1):
            table.add_row(str(index), option.display_name, option.description)
        self.console.print(table)

        answer = Prompt.ask(
            f"Select {title.lower()} (comma-separated numbers, blank for none)",
            default="",
            show_default=False,
            console=self.console,
        )
        return parse_selection(answer, options, on_invalid=self._report_invalid)

    def _report_invalid(self, token: str) -> None:
        self.console.print(f"[yellow]Ignoring invalid selection: {token}[/yellow]")

    def prompt_for_project_plugins(self, project: ProjectDescriptor, plugin_to_load: Optional[Any] = None) -> None:
        """Prompt for the environment of every plugin used by a project.

        Failures are logged per plugin and never abort the loop.
        """
        for plugin_name in collect_project_plugin_names(project, plugin_to_load):
            try:
                self.prompt_for_env_vars(plugin_name)
            except Exception as e:
                logger.warning(f"Failed to prompt for {plugin_name} environment variables: {e}")


def parse_selection(
    answer: Optional[str],
    options: Sequence[PluginDefinition],
    on_invalid: Optional[Callable[[str], None]] = None,
) -> List[str]:
    """Map a comma-separated answer of 1-based indexes or names to plugin names.

    Duplicates collapse; order of first mention is kept.
    """
    selected: List[str] = []
    by_name = {option.name: option for option in options}
    for token in (answer or "").split(","):
        token = token.strip()
        if not token:
            continue
        chosen: Optional[PluginDefinition] = None
        if token.isdigit() and 1 <= int(token) <= len(options):
            chosen = options[int(token) - 1]
        elif token.lower() in by_name:
            chosen = by_name[token.lower()]
        if chosen is None:
            if on_invalid:
                on_invalid(token)
            continue
        if chosen.name not in selected:
            selected.append(chosen.name)
    return selected


def collect_project_plugin_names(project: ProjectDescriptor, plugin_to_load: Optional[Any] = None) -> List[str]:
    """Short names of all plugins a project needs, database plugin last."""
    names: List[str] = []

    def add(name: Optional[str]) -> None:
        if not name:
            return
        simple = simple_plugin_name(name)
        if simple not in names:
            names.append(simple)

    if plugin_to_load is not None:
        add(getattr(plugin_to_load, "name", None))

    for agent in project.agents:
        for plugin in _iter_plugin_names(agent.plugins):
            add(plugin)
        for plugin in agent.character.plugin_names:
            add(plugin)

    add(DATABASE_PLUGIN)
    return names


def _iter_plugin_names(plugins: Iterable[Any]) -> Iterable[str]:
    for plugin in plugins:
        if isinstance(plugin, str):
            yield plugin
        elif isinstance(plugin, dict):
            name = plugin.get("name")
            if isinstance(name, str):
                yield name
        elif isinstance(getattr(plugin, "name", None), str):
            yield plugin.name
