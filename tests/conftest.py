"""Shared fixtures: stub collaborators and an on-disk project tree."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import pytest
import yaml

# Add project root to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from schema_whitelist.core.config import Settings
from schema_whitelist.core.exceptions import ComponentNotFoundError
from schema_whitelist.schema.config import build_schema
from schema_whitelist.schema.dto import Schema


class StubRegistrar:
    def __init__(self, paths: dict[str, str]) -> None:
        self.paths = paths

    def get_paths(self, component_type: str) -> dict[str, str]:
        return dict(self.paths)

    def get_path(self, component_type: str, name: str) -> str:
        if name not in self.paths:
            raise ComponentNotFoundError(name)
        return self.paths[name]


class StubReader:
    def __init__(self, data: dict[str, dict[str, Any]]) -> None:
        self.data = data
        self.calls: list[str] = []

    def read(self, scope: str) -> dict[str, Any]:
        self.calls.append(scope)
        return self.data.get(scope, {})


class StubSchemaConfig:
    def __init__(self, schema: Schema) -> None:
        self.schema = schema

    def get_declaration_config(self) -> Schema:
        return self.schema


class StubDeploymentConfig:
    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values = values or {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


class StubNameResolver:
    """Predictable names: upper-cased table and columns joined by underscores."""

    def __init__(self) -> None:
        self.index_calls: list[tuple[str, list[str], str | None]] = []

    def get_full_index_name(self, table, columns, index_type=None) -> str:
        self.index_calls.append((table.name, list(columns), index_type))
        return "_".join([table.name, *columns]).upper()

    def get_full_fk_name(self, table, column, reference_table, reference_column) -> str:
        return f"FK_{table.name}_{column.name}_{reference_table.name}_{reference_column.name}".upper()


class RecordingPersistor:
    def __init__(self) -> None:
        self.writes: list[tuple[dict[str, Any], str]] = []

    def persist(self, data: dict[str, Any], path: str) -> str:
        self.writes.append((data, path))
        return path


@pytest.fixture
def stub_registrar():
    return StubRegistrar


@pytest.fixture
def stub_reader():
    return StubReader


@pytest.fixture
def make_schema_config():
    def _make(*declarations: dict[str, Any]) -> StubSchemaConfig:
        return StubSchemaConfig(build_schema(list(declarations)))

    return _make


@pytest.fixture
def stub_deployment_config():
    return StubDeploymentConfig


@pytest.fixture
def stub_name_resolver():
    return StubNameResolver()


@pytest.fixture
def recording_persistor():
    return RecordingPersistor()


PRIMARY_SCHEMA = {
    "table": {
        "core_config_data": {
            "column": {"config_id": {"type": "int"}, "path": {"type": "varchar"}},
            "constraint": [{"type": "primary", "column": ["config_id"]}],
        },
    },
}

CATALOG_SCHEMA = {
    "table": {
        "catalog_category": {
            "column": {
                "entity_id": {"type": "int"},
                "name": {"type": "varchar"},
                "store_id": {"type": "smallint"},
            },
            "index": [{"column": ["name"], "indexType": "btree"}],
            "constraint": [
                {"type": "primary", "column": ["entity_id"]},
                {
                    "type": "foreign",
                    "column": "store_id",
                    "referenceTable": "store",
                    "referenceColumn": "store_id",
                },
            ],
        },
        "core_config_data": {
            "column": {"catalog_flag": {"type": "int"}},
        },
    },
}

STORE_SCHEMA = {
    "table": {
        "store": {
            "column": {"store_id": {"type": "smallint"}, "code": {"type": "varchar"}},
            "constraint": [
                {"type": "primary", "column": ["store_id"]},
                {"type": "unique", "column": ["code"]},
            ],
        },
    },
}


def _write_yaml(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Settings:
    """A small installation with a primary schema and two modules."""
    etc = tmp_path / "app" / "etc"
    _write_yaml(etc / "env.yaml", {"db": {"table_prefix": ""}})
    _write_yaml(etc / "db_schema.yaml", PRIMARY_SCHEMA)
    _write_yaml(
        etc / "modules.yaml",
        {"modules": {"Catalog": "app/code/Catalog", "Store": "app/code/Store"}},
    )
    _write_yaml(tmp_path / "app" / "code" / "Catalog" / "etc" / "db_schema.yaml", CATALOG_SCHEMA)
    _write_yaml(tmp_path / "app" / "code" / "Store" / "etc" / "db_schema.yaml", STORE_SCHEMA)

    return Settings(
        base_dir=str(tmp_path),
        registry_path=str(etc / "modules.yaml"),
        primary_schema_path=str(etc / "db_schema.yaml"),
        deployment_config_path=str(etc / "env.yaml"),
        schema_file_name="db_schema.yaml",
        whitelist_file_name="db_schema_whitelist.json",
        log_level="INFO",
    )
