"""
Project/plugin discovery for the working directory.

Order of inspection:

1. ``package.json``: ``eliza.type`` of ``plugin`` or ``project`` decides; failing
   both, a description mentioning "project" marks a project.
2. The manifest's ``main`` file is loaded. A plugin-shaped default export (or an
   existing plugin flag) makes it a plugin, checked before the project shape.
3. Without a manifest, ``project.json``, ``eliza.json`` and ``agents.json`` are
   tried in that order.

Every failure is logged and treated as "nothing found at this step".
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from eliza_cli.constants import PACKAGE_MANIFEST_FILENAME, PROJECT_DESCRIPTOR_FILENAMES
from eliza_cli.protocols.module_loader import ModuleLoader
from eliza_cli.protocols.plugin import Plugin
from eliza_cli.schemas.project import DiscoveryKind, DiscoveryResult, PackageManifest, ProjectDescriptor

from .classification import find_plugin_export, is_plugin_shaped, is_project_shaped, normalize_project
from .module_loader import ImportlibModuleLoader

logger = logging.getLogger(__name__)


class _Findings:
    """Mutable scratch state while walking the discovery steps."""

    def __init__(self) -> None:
        self.is_project = False
        self.is_plugin = False
        self.project: Optional[ProjectDescriptor] = None
        self.plugin_module: Optional[Plugin] = None

    def result(self) -> DiscoveryResult:
        if self.project is not None:
            return DiscoveryResult(kind=DiscoveryKind.PROJECT, project=self.project)
        if self.is_plugin:
            return DiscoveryResult(kind=DiscoveryKind.PLUGIN, plugin_module=self.plugin_module)
        if self.is_project:
            return DiscoveryResult(kind=DiscoveryKind.PROJECT)
        return DiscoveryResult.none()


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


class ProjectDiscoverer:
    """Classifies a directory as project, plugin, or neither."""

    def __init__(self, module_loader: Optional[ModuleLoader] = None) -> None:
        self.module_loader = module_loader or ImportlibModuleLoader()

    def discover(self, directory: Path) -> DiscoveryResult:
        findings = _Findings()
        try:
            manifest_path = directory / PACKAGE_MANIFEST_FILENAME
            if manifest_path.exists():
                self._inspect_manifest(manifest_path, findings)
            else:
                self._scan_descriptor_files(directory, findings)
        except Exception as e:
            logger.error(f"Error checking for project/plugin: {e}")

        result = findings.result()
        self._log_result(result)
        return result

    def _inspect_manifest(self, manifest_path: Path, findings: _Findings) -> None:
        try:
            data = _read_json(manifest_path)
        except (OSError, ValueError) as e:
            logger.warning(f"Error reading {manifest_path}: {e}")
            return
        if not isinstance(data, dict):
            logger.warning(f"{manifest_path} is not a JSON object")
            return

        manifest = PackageManifest.from_json(data)
        if manifest.component_type == "plugin":
            findings.is_plugin = True
            logger.info("Found Eliza plugin in current directory")
        if manifest.component_type == "project":
            findings.is_project = True
            logger.info("Found Eliza project in current directory")
        if not findings.is_project and not findings.is_plugin:
            if manifest.description and "project" in manifest.description.lower():
                findings.is_project = True
                logger.info(f"Found project by description in {PACKAGE_MANIFEST_FILENAME}")

        if manifest.main:
            self._load_main_entry(manifest_path.parent / manifest.main, findings)

    def _load_main_entry(self, main_path: Path, findings: _Findings) -> None:
        main_path = main_path.resolve()
        if not main_path.exists():
            logger.error(f"Main entry point {main_path} does not exist")
            return

        try:
            module = self.module_loader.load(main_path)
        except Exception as e:
            logger.error(f"Error importing module: {e}")
            return

        if findings.is_plugin or is_plugin_shaped(module.default):
            findings.is_plugin = True
            if not is_plugin_shaped(module.default):
                logger.warning("Plugin loaded but no default export found, looking for other exports")
            findings.plugin_module = find_plugin_export(module)
            logger.info(f"Loaded plugin: {getattr(findings.plugin_module, 'name', None) or 'unnamed'}")
        elif findings.is_project or is_project_shaped(module.default):
            findings.is_project = True
            if module.default is not None:
                findings.project = normalize_project(module.default, source=str(main_path))
                logger.info(f"Loaded project with {len(findings.project.agents)} agents")

    def _scan_descriptor_files(self, directory: Path, findings: _Findings) -> None:
        for filename in PROJECT_DESCRIPTOR_FILENAMES:
            file_path = directory / filename
            if not file_path.exists():
                continue
            try:
                data: Dict[str, Any] = _read_json(file_path)
            except (OSError, ValueError) as e:
                logger.warning(f"Error reading possible project file {filename}: {e}")
                continue
            if isinstance(data, dict) and is_project_shaped(data):
                findings.is_project = True
                findings.project = normalize_project(data, source=str(file_path))
                logger.info(f"Found project in {filename}")
                return

        logger.info("No package.json or project files found, using custom character")

    def _log_result(self, result: DiscoveryResult) -> None:
        if result.is_project:
            if result.project is None:
                logger.warning("Project module doesn't contain a valid default export")
                return
            names = ", ".join(agent.name for agent in result.project.agents)
            logger.info(f"Project contains {len(result.project.agents)} agent(s)")
            if names:
                logger.info(f"Agents: {names}")
        elif result.is_plugin:
            logger.info(f"Found plugin: {getattr(result.plugin_module, 'name', None) or 'unnamed'}")
        else:
            logger.info("No project or plugin found, will use custom character")


def discover_project_or_plugin(directory: Path, module_loader: Optional[ModuleLoader] = None) -> DiscoveryResult:
    """Convenience wrapper around ProjectDiscoverer."""
    return ProjectDiscoverer(module_loader=module_loader).discover(directory)
