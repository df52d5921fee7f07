"""Declarative schema module.

Contains the schema model, the declarative schema reader and canonical element naming.
"""

from .config import SchemaConfig, build_schema
from .dto import Column, Schema, Table
from .name_resolver import ElementNameResolver, shorten_name
from .reader import PRIMARY_SCOPE, SchemaReader

__all__ = [
    "Column",
    "Schema",
    "Table",
    "SchemaConfig",
    "build_schema",
    "ElementNameResolver",
    "shorten_name",
    "PRIMARY_SCOPE",
    "SchemaReader",
]
