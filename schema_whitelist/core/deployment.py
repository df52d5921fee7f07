"""Read-only access to the installation's deployment configuration (env.yaml)."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH_DB_PREFIX = "db/table_prefix"


class DeploymentConfig:
    def __init__(self, path: str) -> None:
        self.path = path
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            if os.path.exists(self.path):
                with open(self.path, "r", encoding="utf-8") as handle:
                    self._data = yaml.safe_load(handle) or {}
            else:
                logger.debug(f"Deployment config {self.path} not found, treating every key as absent")
                self._data = {}
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Resolve a slash-separated path such as ``db/table_prefix``."""
        node: Any = self._load()
        for part in key.split("/"):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node
