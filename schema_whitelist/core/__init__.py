"""Core infrastructure module.

Contains configuration, installation collaborators, result models, and exceptions.
"""

from .config import (
    Settings,
    get_settings,
    get_cached_settings,
    clear_settings_cache,
)
from .deployment import CONFIG_PATH_DB_PREFIX, DeploymentConfig
from .exceptions import ComponentNotFoundError, ConfigurationMismatchError, SchemaReadError
from .models import GenerationReport, ModuleResult
from .registry import ALL_MODULES, MODULE, ComponentRegistrar

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_cached_settings",
    "clear_settings_cache",
    # Installation
    "CONFIG_PATH_DB_PREFIX",
    "DeploymentConfig",
    "ALL_MODULES",
    "MODULE",
    "ComponentRegistrar",
    # Exceptions
    "ComponentNotFoundError",
    "ConfigurationMismatchError",
    "SchemaReadError",
    # Models
    "GenerationReport",
    "ModuleResult",
]
