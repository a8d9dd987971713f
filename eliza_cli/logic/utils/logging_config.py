"""
Logging setup for the Eliza CLI.

Console logging is configured first thing in the command handler; file logging
is optional and writes into the profile's ``logs`` directory.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Third-party loggers that are too chatty at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access", "multipart")


def _resolve_level(level: Union[int, str, None]) -> int:
    """Resolve a level from an int, a level name, or the LOG_LEVEL env var."""
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


def setup_basic_logging(
    level: Union[int, str, None] = None,
    log_to_file: bool = False,
    console_output: bool = True,
    log_dir: Optional[Path] = None,
    filename: str = "eliza.log",
) -> None:
    """Configure root logging for the CLI process.

    Args:
        level: Log level (int or name). Defaults to LOG_LEVEL env var, then INFO.
        log_to_file: Also write logs to ``log_dir / filename``.
        console_output: Emit logs on stderr.
        log_dir: Directory for the log file (required when log_to_file is True).
        filename: Log file name.
    """
    resolved_level = _resolve_level(level)
    root = logging.getLogger()
    root.setLevel(resolved_level)

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(console_handler)

    if log_to_file:
        if log_dir is None:
            raise ValueError("log_dir is required when log_to_file is True")
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / filename, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(file_handler)

    if resolved_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
