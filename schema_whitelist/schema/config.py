from __future__ import annotations

import logging
from typing import Any

from ..core.registry import MODULE, ComponentRegistrar
from .dto import Schema
from .reader import PRIMARY_SCOPE, SchemaReader

logger = logging.getLogger(__name__)


def build_schema(declarations: list[dict[str, Any]]) -> Schema:
    """Combine declared data from several scopes into one Schema.

    A table declared in more than one scope gets the union of its columns.
    """
    schema = Schema()
    for data in declarations:
        for table_name, table_data in (data.get("table") or {}).items():
            table = schema.add_table(table_name)
            for column_name, meta in ((table_data or {}).get("column") or {}).items():
                data_type = meta.get("type") if isinstance(meta, dict) else None
                table.add_column(column_name, data_type)
    return schema


class SchemaConfig:
    def __init__(self, reader: SchemaReader, registrar: ComponentRegistrar) -> None:
        self.reader = reader
        self.registrar = registrar
        self._schema: Schema | None = None

    def get_declaration_config(self) -> Schema:
        if self._schema is None:
            declarations = [self.reader.read(PRIMARY_SCOPE)]
            for module_name in self.registrar.get_paths(MODULE):
                declarations.append(self.reader.read(module_name))
            self._schema = build_schema(declarations)
            logger.info(f"Declaration schema built: {len(self._schema.tables)} tables")
        return self._schema
