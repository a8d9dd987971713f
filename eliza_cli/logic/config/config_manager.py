"""
Persisted user configuration.

Stores the selected services and AI models as JSON in the profile directory
and reports which known plugins have their required environment variables set.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from eliza_cli.logic.utils.path_resolution import get_config_file_path, get_eliza_home
from eliza_cli.schemas.config import UserConfig

from .env_utils import is_env_var_set
from .plugin_registry import KNOWN_PLUGINS

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load/save the user's service and model selections."""

    def __init__(self, home: Optional[Path] = None, console: Optional[Console] = None) -> None:
        self.home = home or get_eliza_home()
        self.config_path = get_config_file_path(self.home)
        self.console = console or Console()

    def load_config(self) -> UserConfig:
        """Return the persisted configuration or the first-run default.

        Never raises: a missing, unreadable or malformed file yields the default.
        """
        if not self.config_path.exists():
            return UserConfig.default()

        try:
            raw = json.loads(self.config_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read configuration at {self.config_path}: {e}")
            return UserConfig.default()

        if not isinstance(raw, dict):
            logger.warning(f"Configuration at {self.config_path} is not a JSON object, using defaults")
            return UserConfig.default()

        raw.pop("isDefault", None)
        raw.pop("is_default", None)
        try:
            return UserConfig.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Invalid configuration at {self.config_path}: {e}")
            return UserConfig.default()

    def save_config(self, config: UserConfig) -> None:
        """Overwrite the persisted configuration. The saved config is never default."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        payload = config.to_storage()
        self.config_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        logger.debug(f"Saved configuration to {self.config_path}")

    def get_plugin_status(self) -> Dict[str, bool]:
        """Whether each known plugin has all required environment variables set."""
        return {
            name: all(is_env_var_set(var.name) for var in definition.required_env_vars)
            for name, definition in KNOWN_PLUGINS.items()
        }

    def display_config_status(self) -> None:
        """Print current selections and plugin readiness."""
        config = self.load_config()
        status = self.get_plugin_status()

        table = Table(title="Eliza configuration")
        table.add_column("Plugin")
        table.add_column("Category")
        table.add_column("Selected")
        table.add_column("Environment")

        selected = set(config.services) | set(config.ai_models)
        for name, definition in KNOWN_PLUGINS.items():
            table.add_row(
                definition.display_name,
                definition.category.value,
                "yes" if name in selected else "",
                "[green]ready[/green]" if status[name] else "[yellow]missing[/yellow]",
            )

        self.console.print(table)
        if config.is_default:
            self.console.print("No saved configuration yet.")
        elif config.last_updated:
            self.console.print(f"Last updated: {config.last_updated}")
