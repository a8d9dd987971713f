"""
TCP port allocation for the agent server.
"""

import errno
import logging
import socket

from eliza_cli.constants import DEFAULT_SERVER_HOST, MAX_SERVER_PORT
from eliza_cli.logic.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

_UNAVAILABLE_ERRNOS = (errno.EADDRINUSE, errno.EACCES)


def is_port_available(port: int, host: str = DEFAULT_SERVER_HOST) -> bool:
    """Check whether ``port`` can be bound on ``host``.

    Returns False when the port is in use or binding it is not permitted.
    Other socket errors propagate.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host, port))
    except OSError as e:
        if e.errno in _UNAVAILABLE_ERRNOS:
            return False
        raise
    finally:
        sock.close()
    return True


def find_available_port(start: int, host: str = DEFAULT_SERVER_HOST) -> int:
    """Return the first bindable port at or above ``start``.

    Raises:
        ConfigurationError: If no port up to 65535 can be bound.
    """
    port = start
    while not is_port_available(port, host):
        if port >= MAX_SERVER_PORT:
            raise ConfigurationError(f"No available port between {start} and {MAX_SERVER_PORT} on {host}")
        logger.warning(f"Port {port} is in use, trying {port + 1}")
        port += 1
    return port
