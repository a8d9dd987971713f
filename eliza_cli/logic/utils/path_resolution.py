"""
Eliza profile path resolution.

Every user-level file lives under a single profile directory:

- ``$ELIZA_HOME`` if set, otherwise ``~/.eliza``
- ``<profile>/db``          managed embedded database directory
- ``<profile>/logs``        optional log files
- ``<profile>/.env``        persisted credentials
- ``<profile>/config.json`` persisted service/model selections
"""

import os
from pathlib import Path

from eliza_cli.constants import CONFIG_FILENAME, DB_DIRNAME, ELIZA_HOME_DIRNAME, ENV_FILENAME, LOGS_DIRNAME


def get_eliza_home() -> Path:
    """Get the profile directory (not created here)."""
    env_home = os.environ.get("ELIZA_HOME")
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / ELIZA_HOME_DIRNAME


def get_db_dir(home: Path) -> Path:
    return home / DB_DIRNAME


def get_logs_dir(home: Path) -> Path:
    return home / LOGS_DIRNAME


def get_env_file_path(home: Path) -> Path:
    return home / ENV_FILENAME


def get_config_file_path(home: Path) -> Path:
    return home / CONFIG_FILENAME


def get_package_root() -> Path:
    """Directory of the installed ``eliza_cli`` package."""
    return Path(__file__).resolve().parent.parent.parent


def get_client_build_candidates() -> list[Path]:
    """Candidate client bundle locations, packaged location first.

    1. ``<package>/client``                 (bundled by the release build)
    2. ``<repo>/packages/client/dist``      (development checkout)
    """
    package_root = get_package_root()
    return [
        package_root / "client",
        package_root.parent / "packages" / "client" / "dist",
    ]


def get_client_source_dir() -> Path:
    """Client source tree in a development checkout."""
    return get_package_root().parent / "packages" / "client"
