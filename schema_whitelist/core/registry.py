"""Registry of installed components and their filesystem paths."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from .exceptions import ComponentNotFoundError

logger = logging.getLogger(__name__)

MODULE = "module"
ALL_MODULES = "all"


def _load_payload(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


class ComponentRegistrar:
    """Module name -> path mapping loaded from ``modules.yaml``.

    Expected layout::

        modules:
          Catalog: app/code/Catalog
          Store: /abs/path/to/Store

    Relative paths are resolved against ``base_dir``.
    """

    def __init__(self, registry_path: str, base_dir: str) -> None:
        self.registry_path = registry_path
        self.base_dir = base_dir
        self._paths: dict[str, dict[str, str]] | None = None

    def _load(self) -> dict[str, dict[str, str]]:
        if self._paths is not None:
            return self._paths

        modules: dict[str, str] = {}
        if os.path.exists(self.registry_path):
            payload = _load_payload(self.registry_path)
            for name, path in (payload.get("modules") or {}).items():
                if not isinstance(name, str):
                    logger.warning(f"Module name {name!r} in {self.registry_path} is not a string, skipping")
                    continue
                if not path:
                    logger.warning(f"Module {name} has no path in {self.registry_path}, skipping")
                    continue
                modules[name] = os.path.abspath(os.path.join(self.base_dir, str(path)))
        else:
            logger.warning(f"Component registry {self.registry_path} not found")

        self._paths = {MODULE: modules}
        return self._paths

    def get_paths(self, component_type: str) -> dict[str, str]:
        return dict(self._load().get(component_type, {}))

    def get_path(self, component_type: str, name: str) -> str:
        path = self._load().get(component_type, {}).get(name)
        if path is None:
            raise ComponentNotFoundError(f"{component_type.capitalize()} '{name}' is not registered")
        return path
