"""Read declarative schema files into plain nested data.

The returned structure is::

    {"table": {
        "catalog_category": {
            "column": {"entity_id": {"type": "int"}, ...},
            "index": [{"column": ["name"], "indexType": "btree"}, ...],
            "constraint": [{"type": "foreign", "column": "store_id",
                            "referenceTable": "store", "referenceColumn": "store_id"}, ...],
        },
    }}
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

import yaml

from ..core.exceptions import SchemaReadError
from ..core.registry import MODULE, ComponentRegistrar

logger = logging.getLogger(__name__)

PRIMARY_SCOPE = "primary"


def _load_payload(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as handle:
        if path.lower().endswith(".json"):
            return json.load(handle)
        return yaml.safe_load(handle)


class SchemaReader:
    def __init__(
        self,
        registrar: ComponentRegistrar,
        primary_schema_path: str,
        schema_file_name: str,
    ) -> None:
        self.registrar = registrar
        self.primary_schema_path = primary_schema_path
        self.schema_file_name = schema_file_name

    def schema_path(self, scope: str) -> str:
        if scope == PRIMARY_SCOPE:
            return self.primary_schema_path
        module_path = self.registrar.get_path(MODULE, scope)
        return os.path.join(module_path, "etc", self.schema_file_name)

    def read(self, scope: str) -> dict[str, Any]:
        """Read the declared schema of a module, or of the primary scope."""
        path = self.schema_path(scope)
        if not os.path.exists(path):
            logger.debug(f"No declarative schema for {scope} at {path}")
            return {}

        try:
            payload = _load_payload(path)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise SchemaReadError(f"Failed to parse {path}: {exc}") from exc

        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise SchemaReadError(f"Declarative schema {path} must be a mapping, got {type(payload).__name__}")

        tables = payload.get("table")
        if tables is not None and not isinstance(tables, dict):
            raise SchemaReadError(f"'table' in {path} must be a mapping of table name to table data")
        _check_names(path, tables or {})
        return payload


def _check_names(path: str, tables: dict[Any, Any]) -> None:
    # YAML turns unquoted on/off/yes/no into booleans and ISO dates into date objects.
    for table_name, table_data in tables.items():
        if not isinstance(table_name, str):
            raise SchemaReadError(f"Table name {table_name!r} in {path} must be a string, quote it")
        columns = table_data.get("column") if isinstance(table_data, dict) else None
        if not isinstance(columns, dict):
            continue
        for column_name in columns:
            if not isinstance(column_name, str):
                raise SchemaReadError(
                    f"Column name {column_name!r} of table {table_name} in {path} must be a string, quote it"
                )
