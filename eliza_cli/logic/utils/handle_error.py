"""Top-level error handler shared by CLI commands."""

import logging
import sys
from typing import NoReturn

from .errors import ElizaError

logger = logging.getLogger(__name__)


def handle_error(error: BaseException) -> NoReturn:
    """Report an uncaught error and exit the process with status 1.

    Known ElizaError subclasses are reported by message only; anything else is
    logged with its traceback at DEBUG level so ``--dev`` runs show the full
    stack.
    """
    if isinstance(error, ElizaError):
        logger.error(f"An error occurred: {error}")
    else:
        logger.error(f"An unexpected error occurred: {type(error).__name__}: {error}")
        logger.debug("Traceback:", exc_info=(type(error), error, error.__traceback__))

    for handler in logging.getLogger().handlers:
        handler.flush()
    sys.exit(1)
