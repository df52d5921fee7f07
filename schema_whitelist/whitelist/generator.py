"""Generate per-module whitelists of declared schema elements.

A whitelist records, per table, every column, index and constraint a module is
allowed to declare::

    {"catalog_category": {
        "column": {"entity_id": true, "name": true},
        "index": {"IDX_CATALOG_CATEGORY_NAME": true},
        "constraint": {"PRIMARY": true},
    }}

Generation only ever adds entries. Removing an element from the whitelist is a
manual operation.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from ..core.deployment import CONFIG_PATH_DB_PREFIX, DeploymentConfig
from ..core.exceptions import ConfigurationMismatchError
from ..core.models import GenerationReport, ModuleResult
from ..core.registry import ALL_MODULES, MODULE, ComponentRegistrar
from ..schema.config import SchemaConfig
from ..schema.dto import Schema, Table
from ..schema.name_resolver import ElementNameResolver
from ..schema.reader import PRIMARY_SCOPE, SchemaReader
from .declarations import ConstraintDeclaration, IndexDeclaration, parse_entries
from .merge import merge_recursive
from .persistor import JsonPersistor, load_whitelist

logger = logging.getLogger(__name__)

MODULE_ETC_DIR = "etc"


def filter_primary_tables(
    module_data: Mapping[str, Any],
    primary_data: Mapping[str, Any],
) -> dict[str, Any]:
    """Drop every table the primary schema owns from a module's declared data."""
    filtered = dict(module_data)
    module_tables = module_data.get("table")
    primary_tables = primary_data.get("table")
    if module_tables and primary_tables:
        filtered["table"] = {
            name: table_data
            for name, table_data in module_tables.items()
            if name not in primary_tables
        }
    return filtered


def get_elements_with_fixed_name(table_data: Mapping[str, Any]) -> dict[str, Any]:
    """Columns are whitelisted under their declared names."""
    declared: dict[str, Any] = {}
    columns = table_data.get("column")
    if columns:
        declared["column"] = {name: True for name in columns}
    return declared


class WhitelistGenerator:
    def __init__(
        self,
        registrar: ComponentRegistrar,
        persistor: JsonPersistor,
        schema_config: SchemaConfig,
        reader: SchemaReader,
        name_resolver: ElementNameResolver,
        deployment_config: DeploymentConfig,
        whitelist_file_name: str,
    ) -> None:
        self.registrar = registrar
        self.persistor = persistor
        self.schema_config = schema_config
        self.reader = reader
        self.name_resolver = name_resolver
        self.deployment_config = deployment_config
        self.whitelist_file_name = whitelist_file_name
        self._primary_db_schema: dict[str, Any] | None = None

    def generate(self, module_name: str) -> GenerationReport:
        """Update the whitelist of one module, or of every module for ``"all"``.

        Raises:
            ConfigurationMismatchError: If the installation uses a table prefix.
            ComponentNotFoundError: If ``module_name`` is not registered.
        """
        self.check_installation()
        schema = self.schema_config.get_declaration_config()

        if module_name == ALL_MODULES:
            module_names = list(self.registrar.get_paths(MODULE))
        else:
            module_names = [module_name]

        report = GenerationReport()
        for name in module_names:
            report.modules.append(self.persist_module(schema, name))
        logger.info(f"Whitelist generation complete: {len(report.written_paths)} of {len(module_names)} modules written")
        return report

    def check_installation(self) -> None:
        table_prefix = self.deployment_config.get(CONFIG_PATH_DB_PREFIX)
        if table_prefix:
            raise ConfigurationMismatchError(
                "Installation uses a table prefix. Please re-install without prefix."
            )

    def whitelist_path(self, module_name: str) -> str:
        module_path = self.registrar.get_path(MODULE, module_name)
        return os.path.join(module_path, MODULE_ETC_DIR, self.whitelist_file_name)

    def get_primary_db_schema(self) -> dict[str, Any]:
        if self._primary_db_schema is None:
            self._primary_db_schema = self.reader.read(PRIMARY_SCOPE)
        return self._primary_db_schema

    def persist_module(self, schema: Schema, module_name: str) -> ModuleResult:
        path = self.whitelist_path(module_name)
        result = ModuleResult(module=module_name, path=path)

        # Start from what was approved before so nothing recorded gets lost.
        content = load_whitelist(path)

        data = filter_primary_tables(self.reader.read(module_name), self.get_primary_db_schema())
        tables = data.get("table") or {}
        if not tables:
            logger.info(f"Module {module_name} declares no whitelistable tables")
            return result

        for table_name, table_data in tables.items():
            table_data = table_data or {}
            fixed = get_elements_with_fixed_name(table_data)
            generated = self.get_elements_with_autogenerated_name(schema, table_name, table_data)
            if not fixed and not generated:
                continue
            content = merge_recursive(content, {table_name: fixed}, {table_name: generated})
            result.tables.append(table_name)

        if content:
            self.persistor.persist(content, path)
            result.written = True
        return result

    def get_elements_with_autogenerated_name(
        self,
        schema: Schema,
        table_name: str,
        table_data: Mapping[str, Any],
    ) -> dict[str, Any]:
        declared: dict[str, Any] = {}
        table = schema.get_table_by_name(table_name)
        # Index names only depend on the table name.
        naming_table = table if table is not None else Table(name=table_name)

        for index in parse_entries(IndexDeclaration, table_data.get("index")):
            if not index.columns:
                logger.debug(f"Skipping index without columns on {table_name}")
                continue
            name = self.name_resolver.get_full_index_name(naming_table, index.columns, index.index_type)
            declared.setdefault("index", {})[name] = True

        for constraint in parse_entries(ConstraintDeclaration, table_data.get("constraint")):
            if constraint.is_foreign:
                name = self._foreign_key_name(schema, table, constraint)
            elif constraint.type and constraint.columns:
                name = self.name_resolver.get_full_index_name(naming_table, constraint.columns, constraint.type)
            else:
                name = None
            if name is None:
                logger.debug(f"Skipping constraint on {table_name}: cannot determine canonical name")
                continue
            declared.setdefault("constraint", {})[name] = True

        return declared

    def _foreign_key_name(
        self,
        schema: Schema,
        table: Table | None,
        constraint: ConstraintDeclaration,
    ) -> str | None:
        if not isinstance(constraint.column, str):
            return None
        if constraint.reference_table is None or constraint.reference_column is None:
            return None
        if table is None:
            return None

        reference_table = schema.get_table_by_name(constraint.reference_table)
        if reference_table is None:
            return None
        column = table.get_column_by_name(constraint.column)
        reference_column = reference_table.get_column_by_name(constraint.reference_column)
        if column is None or reference_column is None:
            return None

        return self.name_resolver.get_full_fk_name(table, column, reference_table, reference_column)
