"""CLI commands."""

from .start import start

__all__ = ["start"]
