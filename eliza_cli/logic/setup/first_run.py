"""First-use setup for the Eliza profile directory.

Creates the profile directory tree and detects whether interactive prompts can
be shown.
"""

import logging
import os
import sys
from pathlib import Path
from typing import List

from eliza_cli.logic.utils.path_resolution import get_db_dir

logger = logging.getLogger(__name__)


def ensure_user_directories(home: Path) -> List[Path]:
    """Create the profile directory and its database directory if absent.

    Idempotent: existing directories are left alone.

    Returns:
        The directories that were created by this call.
    """
    created: List[Path] = []
    for directory, label in ((home, "directory"), (get_db_dir(home), "database directory")):
        if directory.exists():
            continue
        directory.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created {label}: {directory}")
        created.append(directory)
    return created


def is_interactive_environment() -> bool:
    """Check if we're running in an interactive environment.

    Non-interactive environments include:
    - CI/CD pipelines (CI env var set)
    - Docker containers
    - Systemd services
    - Any process whose stdin/stdout is not a TTY

    ELIZA_NONINTERACTIVE=true forces non-interactive mode.
    """
    if os.environ.get("ELIZA_NONINTERACTIVE", "").lower() in ("1", "true", "yes"):
        return False

    ci_indicators = ["CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "GITLAB_CI", "CIRCLECI"]
    if any(os.environ.get(var) for var in ci_indicators):
        return False

    if os.environ.get("DOCKER") or os.path.exists("/.dockerenv"):
        return False

    if os.environ.get("INVOCATION_ID"):  # systemd sets this
        return False

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        return False

    return True
