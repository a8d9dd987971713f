"""Working-directory project/plugin discovery."""

from .discoverer import ProjectDiscoverer, discover_project_or_plugin
from .module_loader import ImportlibModuleLoader

__all__ = ["ImportlibModuleLoader", "ProjectDiscoverer", "discover_project_or_plugin"]
