"""Environment variable helpers backed by python-dotenv."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, set_key

logger = logging.getLogger(__name__)


def get_env_var(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return a non-empty environment variable value, or ``default``."""
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value


def is_env_var_set(name: str) -> bool:
    return get_env_var(name) is not None


def load_env_file(env_file: Path) -> bool:
    """Load ``env_file`` into the process without overriding existing values.

    Returns:
        True if the file existed and was loaded.
    """
    if not env_file.exists():
        return False
    load_dotenv(env_file, override=False)
    logger.debug(f"Loaded environment from {env_file}")
    return True


def persist_env_var(env_file: Path, name: str, value: str) -> None:
    """Write ``name=value`` into ``env_file`` and the current process environment."""
    env_file.parent.mkdir(parents=True, exist_ok=True)
    if not env_file.exists():
        env_file.touch(mode=0o600)
    set_key(str(env_file), name, value, quote_mode="always")
    os.environ[name] = value
