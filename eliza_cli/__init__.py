"""Eliza agent bootstrap CLI.

Provides the ``eliza start`` command: discovers a project or plugin in the
working directory, resolves configuration and credentials, starts agent
runtimes and serves them over HTTP.
"""

from eliza_cli.constants import ELIZA_VERSION

__all__ = ["__version__"]

__version__ = ELIZA_VERSION
