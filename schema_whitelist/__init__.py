"""Declarative schema whitelist generator.

Builds, for every installed module, the list of columns, indexes and constraints
the module is allowed to declare. The list is stored next to the module as
``etc/db_schema_whitelist.json`` and is used to detect schema drift.

Package Structure:
    core/       - Configuration, installation collaborators, models, exceptions
    schema/     - Schema model, declarative schema reader, canonical element names
    whitelist/  - Generator, recursive merge, JSON persistence
"""

from __future__ import annotations

from .core.config import Settings, get_settings, get_cached_settings
from .core.deployment import DeploymentConfig
from .core.exceptions import ComponentNotFoundError, ConfigurationMismatchError, SchemaReadError
from .core.models import GenerationReport, ModuleResult
from .core.registry import ALL_MODULES, ComponentRegistrar
from .schema import ElementNameResolver, Schema, SchemaConfig, SchemaReader
from .whitelist import JsonPersistor, WhitelistGenerator, merge_recursive


def create_generator(settings: Settings | None = None) -> WhitelistGenerator:
    """Wire a WhitelistGenerator with the file-based collaborators."""
    settings = settings or get_cached_settings()
    registrar = ComponentRegistrar(settings.registry_path, settings.base_dir)
    reader = SchemaReader(registrar, settings.primary_schema_path, settings.schema_file_name)
    return WhitelistGenerator(
        registrar=registrar,
        persistor=JsonPersistor(),
        schema_config=SchemaConfig(reader, registrar),
        reader=reader,
        name_resolver=ElementNameResolver(),
        deployment_config=DeploymentConfig(settings.deployment_config_path),
        whitelist_file_name=settings.whitelist_file_name,
    )


__all__ = [
    "Settings",
    "get_settings",
    "get_cached_settings",
    "DeploymentConfig",
    "ComponentNotFoundError",
    "ConfigurationMismatchError",
    "SchemaReadError",
    "GenerationReport",
    "ModuleResult",
    "ALL_MODULES",
    "ComponentRegistrar",
    "ElementNameResolver",
    "Schema",
    "SchemaConfig",
    "SchemaReader",
    "JsonPersistor",
    "WhitelistGenerator",
    "merge_recursive",
    "create_generator",
]
