"""Structural interfaces for plugins and module loading."""

from .module_loader import ModuleLoader
from .plugin import Plugin

__all__ = ["ModuleLoader", "Plugin"]
