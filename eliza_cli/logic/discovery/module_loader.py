"""Loads project entry-point files with importlib."""

import hashlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Dict

from eliza_cli.logic.utils.errors import DiscoveryError
from eliza_cli.schemas.project import RawModule

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "default"


def _module_name_for(path: Path) -> str:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    return f"eliza_user_module_{digest}"


def _public_exports(module: ModuleType) -> Dict[str, Any]:
    names = getattr(module, "__all__", None)
    if names is None:
        names = [name for name in vars(module) if not name.startswith("_")]
    return {name: getattr(module, name) for name in names if hasattr(module, name)}


class ImportlibModuleLoader:
    """Executes a Python file and exposes its ``default`` and public attributes.

    The file's directory is put on ``sys.path`` so sibling imports resolve.
    """

    def load(self, path: Path) -> RawModule:
        path = path.resolve()
        if path.is_dir():
            path = path / "__init__.py"
        if not path.is_file():
            raise DiscoveryError(f"Module file not found: {path}")

        module_name = _module_name_for(path)
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise DiscoveryError(f"Cannot create import spec for {path}")

        module_dir = str(path.parent)
        if module_dir not in sys.path:
            sys.path.insert(0, module_dir)

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise DiscoveryError(f"Error importing {path}: {e}") from e

        logger.debug(f"Imported {path} as {module_name}")
        return RawModule(
            default=getattr(module, DEFAULT_EXPORT_NAME, None),
            exports=_public_exports(module),
            path=str(path),
        )
